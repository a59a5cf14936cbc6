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
Keyed SipHash-2-4 with 128-bit output, and the 64-bit hash derived from it with a fixed key.

The 64-bit `siphash` is the second half of the 128-bit output. Values derived from it are already in use, so the
key, the round counts and the choice of half must stay exactly as they are.

>>> data = b'The quick brown fox jumped over the lazy dogs'
>>> siphash(data) == siphash(data) == SipHash128(data).intdigest()
True
>>> siphash128(b'', key=bytes(range(16))).hex()
'a3817f04ba25a8e66df67214c7550293'
"""

import struct
from typing import Final

from typing_extensions import Self

from ore_encoding.exception import InvalidKeyError

SIPHASH_KEY: Final[bytes] = bytes([
    0xde, 0xad, 0xbe, 0xef, 0xca, 0xfe, 0xba, 0xbe,
    0x8b, 0xad, 0xf0, 0x0d, 0x1b, 0xad, 0xb0, 0x02,
])

KEY_SIZE: Final[int] = 16
DIGEST_SIZE: Final[int] = 16
C_ROUNDS: Final[int] = 2
D_ROUNDS: Final[int] = 4

_MASK64 = (1 << 64) - 1
_kstruct = struct.Struct('<QQ')


def _rotl(x: int, b: int) -> int:
    return ((x << b) | (x >> (64 - b))) & _MASK64


def _sip_rounds(v0: int, v1: int, v2: int, v3: int, rounds: int) -> tuple[int, int, int, int]:
    for _ in range(rounds):
        v0 = (v0 + v1) & _MASK64
        v1 = _rotl(v1, 13) ^ v0
        v0 = _rotl(v0, 32)
        v2 = (v2 + v3) & _MASK64
        v3 = _rotl(v3, 16) ^ v2
        v0 = (v0 + v3) & _MASK64
        v3 = _rotl(v3, 21) ^ v0
        v2 = (v2 + v1) & _MASK64
        v1 = _rotl(v1, 17) ^ v2
        v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


class SipHash128:
    """ Incremental SipHash-2-4 in 128-bit output mode, with a `hashlib`-like interface.

    Feeding the data in several `update` calls gives the same result as a single call with all of it.
    """

    name = 'siphash-2-4-128'
    digest_size = DIGEST_SIZE
    block_size = 8

    __slots__ = ('_state', '_buffer', '_length')

    def __init__(self, data: bytes = b'', *, key: bytes = SIPHASH_KEY) -> None:
        if len(key) != KEY_SIZE:
            raise InvalidKeyError(f'key must be {KEY_SIZE} bytes, got {len(key)}')
        k0, k1 = _kstruct.unpack(key)
        self._state = (
            k0 ^ 0x736f6d6570736575,
            # 128-bit output mode
            k1 ^ 0x646f72616e646f6d ^ 0xee,
            k0 ^ 0x6c7967656e657261,
            k1 ^ 0x7465646279746573,
        )
        self._buffer = b''
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        data = self._buffer + bytes(data)
        self._length += len(data) - len(self._buffer)
        end = len(data) - len(data) % 8
        v0, v1, v2, v3 = self._state
        for offset in range(0, end, 8):
            m = int.from_bytes(data[offset:offset + 8], 'little')
            v3 ^= m
            v0, v1, v2, v3 = _sip_rounds(v0, v1, v2, v3, C_ROUNDS)
            v0 ^= m
        self._state = (v0, v1, v2, v3)
        self._buffer = data[end:]

    def _finish(self) -> tuple[int, int]:
        v0, v1, v2, v3 = self._state
        b = ((self._length & 0xff) << 56) | int.from_bytes(self._buffer, 'little')
        v3 ^= b
        v0, v1, v2, v3 = _sip_rounds(v0, v1, v2, v3, C_ROUNDS)
        v0 ^= b
        v2 ^= 0xee
        v0, v1, v2, v3 = _sip_rounds(v0, v1, v2, v3, D_ROUNDS)
        h1 = v0 ^ v1 ^ v2 ^ v3
        v1 ^= 0xdd
        v0, v1, v2, v3 = _sip_rounds(v0, v1, v2, v3, D_ROUNDS)
        h2 = v0 ^ v1 ^ v2 ^ v3
        return h1, h2

    def digest(self) -> bytes:
        h1, h2 = self._finish()
        return h1.to_bytes(8, 'little') + h2.to_bytes(8, 'little')

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        """ The 64-bit hash: the second half of the 128-bit output.
        """
        _, h2 = self._finish()
        return h2

    def copy(self) -> Self:
        other = self.__class__.__new__(self.__class__)
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other


def siphash128(data: bytes, *, key: bytes = SIPHASH_KEY) -> bytes:
    """ 16-byte SipHash-2-4 digest of `data`.
    """
    return SipHash128(data, key=key).digest()


def siphash(data: bytes) -> int:
    """ Generate a 64-bit hash from an arbitrary length sequence of bytes, keyed with the fixed `SIPHASH_KEY`.
    """
    return SipHash128(data).intdigest()
