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

r"""
This module implements encoding a boolean value as a plaintext.

The format is trivial, `False` sorts before `True`:

- `False` maps to `0`
- `True` maps to `1`

>>> encode_bool(False)
OrePlaintext(0)
>>> encode_bool(True)
OrePlaintext(1)
>>> encode_bool(False) < encode_bool(True)
True
"""

from ore_encoding.exception import UnsupportedTypeError
from ore_encoding.plaintext import OrePlaintext


def encode_bool(value: bool) -> OrePlaintext:
    """ Encodes a boolean value zero-extended to 64 bits.
    """
    if not isinstance(value, bool):
        raise UnsupportedTypeError(f'expected bool, got {type(value).__name__}')
    return OrePlaintext(1 if value else 0)
