#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
Range encoding: turns a comparison against an encoded value into the closed interval of plaintexts to search.

The encrypted index only answers closed-interval membership, so strict comparisons are moved one step inwards at
the edge. The step saturates at the domain bounds, and a comparison that matches nothing (e.g. `< 0`) comes out as a
single-point interval at the extreme instead of an error, since an interval cannot be empty:

>>> encode_lt(OrePlaintext(100))
OreRange(min=OrePlaintext(0), max=OrePlaintext(99))
>>> encode_gt(OrePlaintext(100)).min
OrePlaintext(101)
>>> encode_lt(OrePlaintext(0))
OreRange(min=OrePlaintext(0), max=OrePlaintext(0))
"""

from dataclasses import dataclass
from enum import Enum

from typing_extensions import assert_never

from ore_encoding.domain import IntDomain
from ore_encoding.exception import DomainMismatchError
from ore_encoding.plaintext import OrePlaintext


@dataclass(frozen=True, slots=True)
class OreRange:
    """ Closed interval `[min, max]` over the plaintexts of one domain.
    """
    min: OrePlaintext
    max: OrePlaintext

    @property
    def domain(self) -> type[IntDomain]:
        return self.min.domain

    def __contains__(self, item: OrePlaintext) -> bool:
        return self.min <= item <= self.max


class RangeOperator(str, Enum):
    EQ = 'eq'
    BETWEEN = 'between'
    LT = 'lt'
    LTE = 'lte'
    GT = 'gt'
    GTE = 'gte'


def _bound(value: int, domain: type[IntDomain]) -> OrePlaintext:
    return OrePlaintext(value, domain)


def encode_eq(value: OrePlaintext) -> OreRange:
    return OreRange(min=value, max=value)


def encode_between(min: OrePlaintext, max: OrePlaintext) -> OreRange:
    """ Range between two inclusive endpoints.

    The caller guarantees `min <= max`, this is not checked.
    """
    if min.domain is not max.domain:
        raise DomainMismatchError(f'endpoints from different domains: {min.domain.name} and {max.domain.name}')
    return OreRange(min=min, max=max)


def encode_lt(value: OrePlaintext) -> OreRange:
    domain = value.domain
    return OreRange(
        min=_bound(domain.min_value(), domain),
        max=_bound(domain.predecessor(value.value), domain),
    )


def encode_lte(value: OrePlaintext) -> OreRange:
    domain = value.domain
    return OreRange(min=_bound(domain.min_value(), domain), max=value)


def encode_gt(value: OrePlaintext) -> OreRange:
    domain = value.domain
    return OreRange(
        min=_bound(domain.successor(value.value), domain),
        max=_bound(domain.max_value(), domain),
    )


def encode_gte(value: OrePlaintext) -> OreRange:
    domain = value.domain
    return OreRange(min=value, max=_bound(domain.max_value(), domain))


def encode_range(operator: RangeOperator | str, *values: OrePlaintext) -> OreRange:
    """ Build the range for `operator` applied to `values`.

    `between` takes two values, every other operator takes one.

    >>> encode_range('between', OrePlaintext(3), OrePlaintext(7))
    OreRange(min=OrePlaintext(3), max=OrePlaintext(7))
    >>> encode_range(RangeOperator.GTE, OrePlaintext(2**64 - 1)).min == OrePlaintext(2**64 - 1)
    True
    """
    operator = RangeOperator(operator)
    expected = 2 if operator is RangeOperator.BETWEEN else 1
    if len(values) != expected:
        raise ValueError(f'{operator.value} expects {expected} value(s), got {len(values)}')

    match operator:
        case RangeOperator.EQ:
            return encode_eq(*values)
        case RangeOperator.BETWEEN:
            return encode_between(*values)
        case RangeOperator.LT:
            return encode_lt(*values)
        case RangeOperator.LTE:
            return encode_lte(*values)
        case RangeOperator.GT:
            return encode_gt(*values)
        case RangeOperator.GTE:
            return encode_gte(*values)
        case _:
            assert_never(operator)
