from unittest.mock import patch

import pytest
from structlog.testing import capture_logs

from ore_encoding import version


@pytest.mark.parametrize('build_version', ['1.2.3', '1.2.3-rc.4', 'nightly-ab49c20f'])
def test_valid_build_version(tmp_path, build_version):
    filepath = tmp_path / 'BUILD_VERSION'
    filepath.write_text(build_version + '\n')

    with patch.object(version, 'BUILD_VERSION_FILE_PATH', str(filepath)):
        assert version._get_version() == build_version


def test_invalid_build_version(tmp_path):
    filepath = tmp_path / 'BUILD_VERSION'
    filepath.write_text('v1.2\n')

    with patch.object(version, 'BUILD_VERSION_FILE_PATH', str(filepath)), capture_logs() as logs:
        assert version._get_version() == version.BASE_VERSION + '-local'

    assert logs[0]['event'] == 'ignoring build version with an invalid format'
    assert logs[0]['build_version'] == 'v1.2'


def test_missing_build_version(tmp_path):
    with patch.object(version, 'BUILD_VERSION_FILE_PATH', str(tmp_path / 'BUILD_VERSION')):
        assert version._get_version() == version.BASE_VERSION + '-local'
