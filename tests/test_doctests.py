import doctest
import importlib

import pytest

MODULES = [
    'ore_encoding.batch',
    'ore_encoding.cli.encode',
    'ore_encoding.conf.loader',
    'ore_encoding.domain',
    'ore_encoding.encode',
    'ore_encoding.encoding.bool',
    'ore_encoding.encoding.float',
    'ore_encoding.encoding.uint',
    'ore_encoding.plaintext',
    'ore_encoding.ranges',
    'ore_encoding.siphash',
]


@pytest.mark.parametrize('name', MODULES)
def test_doctests(name):
    module = importlib.import_module(name)
    result = doctest.testmod(module)

    assert result.attempted > 0
    assert result.failed == 0
