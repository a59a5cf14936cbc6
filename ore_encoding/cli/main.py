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

import os
import sys
from collections import defaultdict
from types import ModuleType
from typing import NamedTuple, Optional

from structlog import get_logger

logger = get_logger()

HELP_COMMANDS = ('help', '-h', '--help')


class Command(NamedTuple):
    name: str
    module: ModuleType
    description: str


class CliManager:
    def __init__(self) -> None:
        self.basename: str = os.path.basename(sys.argv[0])
        self.commands: dict[str, Command] = {}
        self.groups: dict[str, list[Command]] = defaultdict(list)

        from . import bench, decode, encode, range_query, siphash

        self.add_cmd('encoding', 'encode', encode, 'Encode values as order-preserving plaintexts')
        self.add_cmd('encoding', 'decode', decode, 'Decode plaintexts back into the 64-bit floats they came from')
        self.add_cmd('ranges', 'range', range_query, 'Compute the plaintext range searched by a comparison')
        self.add_cmd('hashing', 'siphash', siphash, 'Hash data with the keyed SipHash')
        self.add_cmd('dev', 'bench', bench, 'Time float encoding and hashing')

    def add_cmd(self, group: str, cmd: str, module: ModuleType, short_description: Optional[str] = None) -> None:
        command = Command(cmd, module, short_description or '')
        self.commands[cmd] = command
        self.groups[group].append(command)

    def help(self) -> None:
        from colorama import Fore, Style

        from ore_encoding.version import __version__

        print('ore-encoding {}'.format(__version__))
        print()
        print('Usage: {} <subcommand> [options]'.format(self.basename))
        print()

        width = max(len(name) for name in self.commands)
        for group in sorted(self.groups):
            print(Fore.RED + Style.BRIGHT + '[{}]'.format(group) + Style.RESET_ALL)
            for command in self.groups[group]:
                print('    {}   {}'.format(command.name.ljust(width), command.description))
            print()

    def execute_from_command_line(self) -> int:
        from ore_encoding.cli.util import process_logging_options, process_logging_output, setup_logging

        if len(sys.argv) < 2 or sys.argv[1] in HELP_COMMANDS:
            self.help()
            return 0

        cmd = sys.argv.pop(1)
        command = self.commands.get(cmd)
        if command is None:
            print('Unknown command: "{}"'.format(cmd))
            print('Type "{} help" for usage.'.format(self.basename))
            return -1

        # subcommand parsers take their program name from argv[0]
        sys.argv[0] = '{} {}'.format(sys.argv[0], cmd)

        output = process_logging_output(sys.argv)
        options = process_logging_options(sys.argv)
        setup_logging(logging_output=output, logging_options=options)
        return command.module.main() or 0


def main() -> None:
    try:
        sys.exit(CliManager().execute_from_command_line())
    except KeyboardInterrupt:
        logger.warning('Aborting and exiting...')
        sys.exit(1)
    except Exception:
        logger.exception('Uncaught exception:')
        sys.exit(2)


if __name__ == '__main__':
    main()
