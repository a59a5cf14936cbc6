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
Plaintext preparation for order-revealing encryption over unsigned 64-bit integers.

Native values (bools, fixed-width unsigned ints and IEEE-754 floats) are mapped to `OrePlaintext`s whose unsigned
order matches the order of the original values, and comparisons are turned into the closed `OreRange` of plaintexts
a range query has to search.
"""

from ore_encoding.batch import encode_floats, filter_orderable, is_orderable
from ore_encoding.domain import IntDomain, Uint8Domain, Uint16Domain, Uint32Domain, Uint64Domain, get_domain
from ore_encoding.encode import encode, encode_as
from ore_encoding.encoding.bool import encode_bool
from ore_encoding.encoding.float import decode_f64, encode_f32, encode_f64
from ore_encoding.encoding.uint import encode_u8, encode_u16, encode_u32, encode_u64, encode_uint
from ore_encoding.exception import (
    DomainMismatchError,
    InvalidKeyError,
    OreEncodingError,
    UnsupportedTypeError,
    ValueOutOfRangeError,
)
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
from ore_encoding.siphash import SIPHASH_KEY, SipHash128, siphash, siphash128
from ore_encoding.version import __version__

__all__ = [
    '__version__',
    # plaintexts and domains
    'OrePlaintext',
    'IntDomain',
    'Uint8Domain',
    'Uint16Domain',
    'Uint32Domain',
    'Uint64Domain',
    'get_domain',
    # encoders
    'encode',
    'encode_as',
    'encode_bool',
    'encode_uint',
    'encode_u8',
    'encode_u16',
    'encode_u32',
    'encode_u64',
    'encode_f32',
    'encode_f64',
    'decode_f64',
    'is_orderable',
    'filter_orderable',
    'encode_floats',
    # ranges
    'OreRange',
    'RangeOperator',
    'encode_eq',
    'encode_between',
    'encode_lt',
    'encode_lte',
    'encode_gt',
    'encode_gte',
    'encode_range',
    # hashing
    'SIPHASH_KEY',
    'SipHash128',
    'siphash',
    'siphash128',
    # errors
    'OreEncodingError',
    'UnsupportedTypeError',
    'ValueOutOfRangeError',
    'DomainMismatchError',
    'InvalidKeyError',
]
