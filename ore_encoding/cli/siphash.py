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

from ore_encoding.siphash import siphash


def create_parser() -> ArgumentParser:
    from ore_encoding.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('data', nargs='+', help='Data to hash, as UTF-8 text unless --hex is given')
    parser.add_argument('--hex', action='store_true', help='Data is hex encoded')
    return parser


def execute(args: Namespace) -> int:
    for item in args.data:
        if args.hex:
            try:
                data = bytes.fromhex(item)
            except ValueError:
                print('invalid hex data: {}'.format(item))
                return 1
        else:
            data = item.encode('utf-8')
        digest = siphash(data)
        print('{} -> {} (0x{:016x})'.format(item, digest, digest))
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
