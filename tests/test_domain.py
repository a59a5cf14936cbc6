import pytest

from ore_encoding.domain import DOMAINS, Uint8Domain, Uint16Domain, Uint32Domain, Uint64Domain, get_domain
from ore_encoding.exception import UnsupportedTypeError, ValueOutOfRangeError


@pytest.mark.parametrize(
    ['domain', 'bits'],
    [
        (Uint8Domain, 8),
        (Uint16Domain, 16),
        (Uint32Domain, 32),
        (Uint64Domain, 64),
    ]
)
def test_bounds(domain, bits):
    assert domain.min_value() == 0
    assert domain.max_value() == 2**bits - 1
    assert domain.bit_size() == bits


@pytest.mark.parametrize('domain', [Uint8Domain, Uint16Domain, Uint32Domain, Uint64Domain])
def test_step_saturates(domain):
    top = domain.max_value()

    assert domain.successor(0) == 1
    assert domain.successor(top - 1) == top
    assert domain.successor(top) == top
    assert domain.predecessor(top) == top - 1
    assert domain.predecessor(1) == 0
    assert domain.predecessor(0) == 0


def test_check_range_bounds():
    Uint8Domain.check_range(0)
    Uint8Domain.check_range(255)

    with pytest.raises(ValueOutOfRangeError) as e:
        Uint8Domain.check_range(256)
    assert str(e.value) == '256 is above the upper bound of u8'

    with pytest.raises(ValueOutOfRangeError) as e:
        Uint64Domain.check_range(-1)
    assert str(e.value) == '-1 is below the lower bound of u64'


@pytest.mark.parametrize('value', [True, 1.0, '1', None])
def test_check_range_rejects_non_int(value):
    with pytest.raises(UnsupportedTypeError):
        Uint32Domain.check_range(value)


def test_errors_are_builtin_subclasses():
    with pytest.raises(TypeError):
        Uint16Domain.check_range(False)
    with pytest.raises(ValueError):
        Uint16Domain.check_range(2**16)


def test_get_domain():
    assert set(DOMAINS) == {'u8', 'u16', 'u32', 'u64'}
    for name, domain in DOMAINS.items():
        assert get_domain(name) is domain
        assert domain.name == name

    with pytest.raises(ValueError) as e:
        get_domain('i32')
    assert str(e.value) == "unknown domain: 'i32'"
