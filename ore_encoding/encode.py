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
Maps native Python values to the encoder of their type.

>>> encode(True)
OrePlaintext(1)
>>> encode(100)
OrePlaintext(100)
>>> encode(-0.0) == encode(0.0)
True
"""

from typing import Callable, TypeAlias, Union

from ore_encoding.encoding.bool import encode_bool
from ore_encoding.encoding.float import encode_f32, encode_f64
from ore_encoding.encoding.uint import encode_u8, encode_u16, encode_u32, encode_u64
from ore_encoding.exception import UnsupportedTypeError
from ore_encoding.plaintext import OrePlaintext

Encodable: TypeAlias = Union[bool, int, float, OrePlaintext]

# explicit type names, used where Python's own type is not enough to pick a width (e.g. the CLI)
ENCODERS_BY_NAME: dict[str, Callable[..., OrePlaintext]] = {
    'bool': encode_bool,
    'u8': encode_u8,
    'u16': encode_u16,
    'u32': encode_u32,
    'u64': encode_u64,
    'f32': encode_f32,
    'f64': encode_f64,
}


def encode(value: Encodable) -> OrePlaintext:
    """ Encode `value` with the encoder for its Python type.

    `bool` is checked before `int` since it is a subclass of it. Python ints are taken as u64 and Python floats as
    binary64, narrower widths have to be asked for explicitly (see `encode_as`).
    """
    if isinstance(value, OrePlaintext):
        return value
    if isinstance(value, bool):
        return encode_bool(value)
    if isinstance(value, int):
        return encode_u64(value)
    if isinstance(value, float):
        return encode_f64(value)
    raise UnsupportedTypeError(f'cannot encode values of type {type(value).__name__}')


def encode_as(type_name: str, value: Encodable) -> OrePlaintext:
    """ Encode `value` with the encoder registered under `type_name`.

    >>> encode_as('f32', 0.1) == encode(0.10000000149011612)
    True
    """
    try:
        encoder = ENCODERS_BY_NAME[type_name]
    except KeyError:
        raise UnsupportedTypeError(f'unknown type name: {type_name!r}')
    return encoder(value)
