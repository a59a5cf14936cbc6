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
Unsigned integer domains used as plaintext spaces.

Each domain is a class with a fixed byte size that knows its bounds and how to step a value up or down inside them.
Stepping saturates at the bounds instead of wrapping, which is what the range encoder relies on:

>>> Uint8Domain.min_value(), Uint8Domain.max_value()
(0, 255)
>>> Uint8Domain.successor(254), Uint8Domain.successor(255)
(255, 255)
>>> Uint8Domain.predecessor(1), Uint8Domain.predecessor(0)
(0, 0)
>>> get_domain('u64').max_value() == 2**64 - 1
True
"""

from typing import ClassVar

from ore_encoding.exception import UnsupportedTypeError, ValueOutOfRangeError


class IntDomain:
    """ Base class for the fixed-size unsigned integer domains.
    """

    # XXX: subclass must define these values:
    name: ClassVar[str]
    _byte_size: ClassVar[int]

    @classmethod
    def min_value(cls) -> int:
        return 0

    @classmethod
    def max_value(cls) -> int:
        return 2**(cls._byte_size * 8) - 1

    @classmethod
    def bit_size(cls) -> int:
        return cls._byte_size * 8

    @classmethod
    def successor(cls, value: int) -> int:
        """ Next value in the domain, saturating at `max_value()`.
        """
        return min(value + 1, cls.max_value())

    @classmethod
    def predecessor(cls, value: int) -> int:
        """ Previous value in the domain, saturating at `min_value()`.
        """
        return max(value - 1, cls.min_value())

    @classmethod
    def check_range(cls, value: int) -> None:
        # bool is an int subclass, but it has its own encoder
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnsupportedTypeError(f'expected int, got {type(value).__name__}')
        if value > cls.max_value():
            raise ValueOutOfRangeError(f'{value} is above the upper bound of {cls.name}')
        if value < cls.min_value():
            raise ValueOutOfRangeError(f'{value} is below the lower bound of {cls.name}')


class Uint8Domain(IntDomain):
    name = 'u8'
    _byte_size = 1


class Uint16Domain(IntDomain):
    name = 'u16'
    _byte_size = 2


class Uint32Domain(IntDomain):
    name = 'u32'
    _byte_size = 4  # 4-bytes -> 32-bits


class Uint64Domain(IntDomain):
    name = 'u64'
    _byte_size = 8  # 8-bytes -> 64-bits


DOMAINS: dict[str, type[IntDomain]] = {
    domain.name: domain for domain in (Uint8Domain, Uint16Domain, Uint32Domain, Uint64Domain)
}


def get_domain(name: str) -> type[IntDomain]:
    """ Resolve a domain by its short name ('u8', 'u16', 'u32' or 'u64').
    """
    try:
        return DOMAINS[name]
    except KeyError:
        raise ValueError(f'unknown domain: {name!r}')
