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

from argparse import ArgumentParser, Namespace

from structlog import get_logger

from ore_encoding.encode import ENCODERS_BY_NAME, encode_as
from ore_encoding.exception import OreEncodingError
from ore_encoding.plaintext import OrePlaintext

logger = get_logger()

_TRUE_WORDS = ('true', '1', 'yes')
_FALSE_WORDS = ('false', '0', 'no')


def parse_value(type_name: str, raw: str) -> bool | int | float:
    """ Parse the textual `raw` value for the encoder named `type_name`.

    >>> parse_value('bool', 'True'), parse_value('u8', '0xff'), parse_value('f64', '-inf')
    (True, 255, -inf)
    """
    if type_name == 'bool':
        word = raw.lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f'{raw!r} is not a valid boolean')
    if type_name.startswith('u'):
        return int(raw, 0)
    return float(raw)


def format_plaintext(plaintext: OrePlaintext) -> str:
    return f'{plaintext.value} (0x{plaintext.value:016x})'


def create_parser() -> ArgumentParser:
    from ore_encoding.cli.util import create_parser
    parser = create_parser()
    types = ', '.join(ENCODERS_BY_NAME)
    parser.add_argument('values', nargs='+', help=f'Values as TYPE:VALUE, where TYPE is one of: {types}')
    return parser


def execute(args: Namespace) -> int:
    for item in args.values:
        type_name, sep, raw = item.partition(':')
        if not sep or type_name not in ENCODERS_BY_NAME:
            print('wrong data type {}'.format(item))
            return 1
        try:
            plaintext = encode_as(type_name, parse_value(type_name, raw))
        except (OreEncodingError, ValueError) as e:
            print('cannot encode {}: {}'.format(item, e))
            return 1
        logger.debug('encoded', type=type_name, value=raw, plaintext=plaintext.value)
        print('{} -> {}'.format(item, format_plaintext(plaintext)))
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
