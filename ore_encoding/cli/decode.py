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

from ore_encoding.encoding.float import decode_f64
from ore_encoding.exception import OreEncodingError
from ore_encoding.plaintext import OrePlaintext


def create_parser() -> ArgumentParser:
    from ore_encoding.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('plaintexts', nargs='+', help='Plaintexts produced from 64-bit floats, decimal or 0x hex')
    return parser


def execute(args: Namespace) -> int:
    for raw in args.plaintexts:
        try:
            plaintext = OrePlaintext(int(raw, 0))
        except (OreEncodingError, ValueError):
            print('not a 64-bit plaintext: {}'.format(raw))
            return 1
        print('{} -> {!r}'.format(raw, decode_f64(plaintext)))
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
