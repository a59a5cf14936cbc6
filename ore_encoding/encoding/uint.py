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
This module implements encoding of unsigned integers with a fixed width, the width is parametrized by a domain.

Unsigned integers are already ordered, so the value is only checked against its declared width and zero-extended
into the 64-bit plaintext space.

>>> encode_uint(255, domain=Uint8Domain)
OrePlaintext(255)
>>> encode_u16(1234)
OrePlaintext(1234)
>>> encode_u64(2**64 - 1) == OrePlaintext(18446744073709551615)
True
>>> try:
...     encode_u8(256)
... except ValueError as e:
...     print(*e.args)
256 is above the upper bound of u8
"""

from ore_encoding.domain import IntDomain, Uint8Domain, Uint16Domain, Uint32Domain, Uint64Domain
from ore_encoding.plaintext import OrePlaintext


def encode_uint(value: int, *, domain: type[IntDomain]) -> OrePlaintext:
    """ Encode an unsigned int of the given domain's width.

    This modules's docstring has more details and examples.
    """
    domain.check_range(value)
    return OrePlaintext(value)


def encode_u8(value: int) -> OrePlaintext:
    return encode_uint(value, domain=Uint8Domain)


def encode_u16(value: int) -> OrePlaintext:
    return encode_uint(value, domain=Uint16Domain)


def encode_u32(value: int) -> OrePlaintext:
    return encode_uint(value, domain=Uint32Domain)


def encode_u64(value: int) -> OrePlaintext:
    return encode_uint(value, domain=Uint64Domain)
