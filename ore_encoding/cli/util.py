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

import sys
from argparse import ArgumentParser, Namespace
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any, NamedTuple, Optional

import configargparse
import structlog
from typing_extensions import assert_never

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def create_parser(*, prefix: str | None = None, add_help: bool = True) -> ArgumentParser:
    return configargparse.ArgumentParser(auto_env_var_prefix=prefix or 'ore_encoding_', add_help=add_help)


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


class LoggingOptions(NamedTuple):
    debug: bool


def _pop_known_args(parser: ArgumentParser, argv: list[str]) -> Namespace:
    """ Parse the options `parser` knows about, `argv` is left with everything else (in place).
    """
    args, remaining_argv = parser.parse_known_args(argv)
    argv[:] = remaining_argv
    return args


def process_logging_output(argv: list[str]) -> LoggingOutput:
    """Extract logging output before argv parsing."""
    parser = create_parser(add_help=False)
    log_args = parser.add_mutually_exclusive_group()
    log_args.add_argument('--json-logs', action='store_true')
    log_args.add_argument('--disable-logs', action='store_true')

    args = _pop_known_args(parser, argv)
    if args.json_logs:
        return LoggingOutput.JSON
    if args.disable_logs:
        return LoggingOutput.NULL
    return LoggingOutput.PRETTY


def process_logging_options(argv: list[str]) -> LoggingOptions:
    """Extract logging-specific options that are processed before argv parsing."""
    parser = create_parser(add_help=False)
    parser.add_argument('--debug', action='store_true')

    args = _pop_known_args(parser, argv)
    return LoggingOptions(debug=args.debug)


def _get_renderer(logging_output: LoggingOutput) -> Optional[Any]:
    match logging_output:
        case LoggingOutput.NULL:
            return None
        case LoggingOutput.PRETTY:
            return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty(), sort_keys=True)
        case LoggingOutput.JSON:
            return structlog.processors.JSONRenderer()
        case _:
            assert_never(logging_output)


def setup_logging(*, logging_output: LoggingOutput, logging_options: LoggingOptions) -> None:
    """ Send structlog events, and records of stdlib loggers, to stderr through a single root handler.

    Command output goes to stdout, so logs never get mixed into it.
    """
    import logging.config

    timestamper = structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT)
    renderer = _get_renderer(logging_output)

    formatters: dict[str, Any] = {}
    handler: dict[str, Any]
    if renderer is None:
        handler = {'class': 'logging.NullHandler'}
    else:
        formatters['structlog'] = {
            '()': structlog.stdlib.ProcessorFormatter,
            'processor': renderer,
            # records that don't come from structlog
            'foreign_pre_chain': [
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                timestamper,
            ],
        }
        handler = {'class': 'logging.StreamHandler', 'stream': 'ext://sys.stderr', 'formatter': 'structlog'}

    # See: https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': formatters,
        'handlers': {'default': handler},
        'root': {
            'handlers': ['default'],
            'level': 'DEBUG' if logging_options.debug else 'INFO',
        },
    })

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
