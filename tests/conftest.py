import os
import sys

import structlog

from ore_encoding.conf import UNITTESTS_SETTINGS_FILEPATH
from ore_encoding.conf.get_settings import CONFIG_YAML_ENV_VAR

os.environ[CONFIG_YAML_ENV_VAR] = os.environ.get('ORE_ENCODING_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# library logs go to stderr, stdout is compared against in doctests and CLI tests
structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=sys.stderr))
