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
This module implements an order-preserving translation of IEEE-754 floats to 64-bit unsigned plaintexts, and the
reverse operation for 64-bit floats (which is only meant for verifying correctness).

The bit pattern of the float is taken as an unsigned integer and then:

- if the sign bit is set (negative value) every bit is flipped, which reverses the magnitude order of negatives and
  puts all of them below the non-negatives;
- if the sign bit is clear only the sign bit is flipped, which puts non-negatives above every negative.

Negative zero is turned into positive zero first, so both zeros map to the same plaintext just like `-0.0 == 0.0`.
Infinities sort below and above every other non-NaN value, and subnormals are ordinary bit patterns:

>>> hex(encode_f64(float('-inf')))
'0xfffffffffffff'
>>> hex(encode_f64(float('inf')))
'0xfff0000000000000'
>>> encode_f64(-0.0) == encode_f64(0.0) == OrePlaintext(2**63)
True
>>> encode_f64(-1.5) < encode_f64(-1.0) < encode_f64(5e-324) < encode_f64(1.0)
True
>>> decode_f64(encode_f64(123.4567))
123.4567

NaN is accepted, but where its plaintext sorts is unspecified: NaNs should be discarded before encoding a collection
whose order matters (see `ore_encoding.batch`).

Reference: https://lemire.me/blog/2020/12/14/converting-floating-point-numbers-to-integers-while-preserving-order
"""

import struct

from ore_encoding.exception import UnsupportedTypeError, ValueOutOfRangeError
from ore_encoding.plaintext import OrePlaintext

SIGN_BIT: int = 1 << 63
U64_MASK: int = (1 << 64) - 1

_dstruct = struct.Struct('>d')
_fstruct = struct.Struct('>f')
_qstruct = struct.Struct('>Q')


def float_to_bits(value: float) -> int:
    """ Reinterpret the binary64 representation of `value` as an unsigned 64-bit int.

    >>> hex(float_to_bits(1.0))
    '0x3ff0000000000000'
    """
    return _qstruct.unpack(_dstruct.pack(value))[0]


def bits_to_float(bits: int) -> float:
    """ Reinterpret an unsigned 64-bit int as a binary64 float.

    >>> bits_to_float(0x3ff0000000000000)
    1.0
    """
    return _dstruct.unpack(_qstruct.pack(bits))[0]


def to_float32(value: float) -> float:
    """ Round a float to the nearest binary32 value, returned widened back to a Python float.

    Magnitudes beyond the binary32 range overflow to an infinity of the same sign, as an IEEE-754 narrowing would.
    Ints are accepted, including those too large for a binary64.

    >>> to_float32(0.1)
    0.10000000149011612
    >>> to_float32(1e300), to_float32(-10**400)
    (inf, -inf)
    """
    try:
        return _fstruct.unpack(_fstruct.pack(float(value)))[0]
    except OverflowError:
        return float('inf') if value > 0 else float('-inf')


def _check_float(value: float) -> None:
    # ints are accepted as floats, bools are not
    if isinstance(value, bool) or not isinstance(value, (float, int)):
        raise UnsupportedTypeError(f'expected float, got {type(value).__name__}')


def encode_f64(value: float) -> OrePlaintext:
    """ Encode a 64-bit float preserving its order.

    This modules's docstring has more details and examples.
    """
    _check_float(value)
    try:
        value = float(value)
    except OverflowError:
        raise ValueOutOfRangeError(f'{value} does not fit a 64-bit float')
    if value == 0.0:
        # -0.0 == 0.0, so both must produce the same plaintext
        value = 0.0
    bits = float_to_bits(value)
    mask = U64_MASK if bits & SIGN_BIT else SIGN_BIT
    return OrePlaintext(bits ^ mask)


def encode_f32(value: float) -> OrePlaintext:
    """ Encode a 32-bit float preserving its order.

    Widening binary32 to binary64 is exact and keeps the order, so after rounding the argument to binary32 this is
    just `encode_f64`.
    """
    _check_float(value)
    return encode_f64(to_float32(value))


def decode_f64(plaintext: OrePlaintext) -> float:
    """ Recover the 64-bit float that produced `plaintext`.

    Either zero decodes as `0.0`, and the result for a plaintext that came from a NaN is undefined.
    """
    term = int(plaintext)
    top = term >> 63
    # top - 1 is 0 for encoded non-negatives and -1 (all ones) for encoded negatives
    mask = ((top - 1) & U64_MASK) | SIGN_BIT
    return bits_to_float(term ^ mask)
