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

from ore_encoding.domain import get_domain
from ore_encoding.exception import OreEncodingError
from ore_encoding.plaintext import OrePlaintext
from ore_encoding.ranges import RangeOperator, encode_range

logger = get_logger()


def create_parser() -> ArgumentParser:
    from ore_encoding.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('operator', choices=[op.value for op in RangeOperator], help='Comparison operator')
    parser.add_argument('values', nargs='+', help='Plaintext operand(s), two for "between"')
    parser.add_argument('--domain', choices=['u8', 'u16', 'u32', 'u64'],
                        help='Integer domain of the plaintexts (defaults to DEFAULT_RANGE_DOMAIN)')
    return parser


def execute(args: Namespace) -> int:
    from ore_encoding.conf import get_global_settings

    settings = get_global_settings()
    domain = get_domain(args.domain or settings.DEFAULT_RANGE_DOMAIN)
    try:
        values = [OrePlaintext(int(raw, 0), domain) for raw in args.values]
        range_ = encode_range(args.operator, *values)
    except (OreEncodingError, ValueError) as e:
        print('cannot build range: {}'.format(e))
        return 1
    logger.debug('range built', operator=args.operator, domain=domain.name, min=range_.min.value,
                 max=range_.max.value)
    print('[{}, {}]'.format(range_.min.value, range_.max.value))
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
