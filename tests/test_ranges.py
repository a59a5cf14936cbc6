import pytest
from hypothesis import given, strategies as st

from ore_encoding.domain import Uint8Domain, Uint16Domain, Uint32Domain, Uint64Domain
from ore_encoding.encoding.float import encode_f64
from ore_encoding.exception import DomainMismatchError
from ore_encoding.plaintext import OrePlaintext
from ore_encoding.ranges import (
    OreRange,
    RangeOperator,
    encode_between,
    encode_eq,
    encode_gt,
    encode_gte,
    encode_lt,
    encode_lte,
    encode_range,
)

U64_MAX = 2**64 - 1

u64_values = st.integers(min_value=0, max_value=U64_MAX)


def _range(low, high, domain=Uint64Domain):
    return OreRange(min=OrePlaintext(low, domain), max=OrePlaintext(high, domain))


def test_comparisons_with_100():
    value = OrePlaintext(100)
    assert encode_eq(value) == _range(100, 100)
    assert encode_lt(value) == _range(0, 99)
    assert encode_lte(value) == _range(0, 100)
    assert encode_gt(value) == _range(101, U64_MAX)
    assert encode_gte(value) == _range(100, U64_MAX)


def test_between():
    assert encode_between(OrePlaintext(10), OrePlaintext(20)) == _range(10, 20)
    assert encode_between(OrePlaintext(5), OrePlaintext(5)) == _range(5, 5)


def test_saturation_at_the_bounds():
    # nothing is below 0 nor above the max, the result is a single point instead of an empty range
    assert encode_lt(OrePlaintext(0)) == _range(0, 0)
    assert encode_lte(OrePlaintext(0)) == _range(0, 0)
    assert encode_gt(OrePlaintext(U64_MAX)) == _range(U64_MAX, U64_MAX)
    assert encode_gte(OrePlaintext(U64_MAX)) == _range(U64_MAX, U64_MAX)


@pytest.mark.parametrize('domain', [Uint8Domain, Uint16Domain, Uint32Domain])
def test_narrow_domains(domain):
    top = domain.max_value()

    upper = encode_gt(OrePlaintext(top, domain))
    assert upper == _range(top, top)
    assert upper.domain is domain
    assert upper.max.domain is domain

    assert encode_gte(OrePlaintext(1, domain)) == _range(1, top)
    assert encode_gt(OrePlaintext(top - 1, domain)) == _range(top, top)
    assert encode_lt(OrePlaintext(0, domain)) == _range(0, 0)
    assert encode_lt(OrePlaintext(top, domain)).max == OrePlaintext(top - 1)


def test_between_domain_mismatch():
    with pytest.raises(DomainMismatchError) as e:
        encode_between(OrePlaintext(1, Uint8Domain), OrePlaintext(2, Uint16Domain))
    assert str(e.value) == 'endpoints from different domains: u8 and u16'

    assert isinstance(e.value, ValueError)


def test_float_comparison():
    below_two = encode_lt(encode_f64(2.0))
    assert encode_f64(1.5) in below_two
    assert encode_f64(-1e300) in below_two
    assert encode_f64(float('-inf')) in below_two
    assert encode_f64(2.0) not in below_two
    assert encode_f64(2.5) not in below_two

    at_least_zero = encode_gte(encode_f64(-0.0))
    assert encode_f64(0.0) in at_least_zero
    assert encode_f64(-5e-324) not in at_least_zero


def test_contains():
    bound = _range(10, 20)
    assert OrePlaintext(10) in bound
    assert OrePlaintext(15) in bound
    assert OrePlaintext(20) in bound
    assert OrePlaintext(9) not in bound
    assert OrePlaintext(21) not in bound


def test_encode_range():
    value = OrePlaintext(42)
    assert encode_range(RangeOperator.EQ, value) == encode_eq(value)
    assert encode_range(RangeOperator.LT, value) == encode_lt(value)
    assert encode_range('lte', value) == encode_lte(value)
    assert encode_range('gt', value) == encode_gt(value)
    assert encode_range(RangeOperator.GTE, value) == encode_gte(value)
    assert encode_range('between', OrePlaintext(1), value) == _range(1, 42)


def test_encode_range_arity():
    with pytest.raises(ValueError) as e:
        encode_range('between', OrePlaintext(1))
    assert str(e.value) == 'between expects 2 value(s), got 1'

    with pytest.raises(ValueError):
        encode_range('lt', OrePlaintext(1), OrePlaintext(2))

    with pytest.raises(ValueError):
        encode_range('ne', OrePlaintext(1))


@given(u64_values, u64_values)
def test_strict_bounds_exclude_the_value(x, y):
    value, other = OrePlaintext(x), OrePlaintext(y)
    if x > 0:
        assert (other in encode_lt(value)) == (y < x)
    if x < U64_MAX:
        assert (other in encode_gt(value)) == (y > x)
    assert (other in encode_lte(value)) == (y <= x)
    assert (other in encode_gte(value)) == (y >= x)
    assert (other in encode_eq(value)) == (y == x)


@given(u64_values, u64_values)
def test_bounds_are_ordered(x, y):
    low, high = sorted((x, y))
    for bound in (
        encode_eq(OrePlaintext(x)),
        encode_lt(OrePlaintext(x)),
        encode_lte(OrePlaintext(x)),
        encode_gt(OrePlaintext(x)),
        encode_gte(OrePlaintext(x)),
        encode_between(OrePlaintext(low), OrePlaintext(high)),
    ):
        assert bound.min <= bound.max
