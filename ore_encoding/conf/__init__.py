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

from ore_encoding.conf.get_settings import DEFAULT_SETTINGS_FILEPATH, get_global_settings, get_settings_source
from ore_encoding.conf.loader import BUNDLED_CONF_DIR
from ore_encoding.conf.settings import OreEncodingSettings

UNITTESTS_SETTINGS_FILEPATH = str(BUNDLED_CONF_DIR / 'unittests.yml')

__all__ = [
    'DEFAULT_SETTINGS_FILEPATH',
    'UNITTESTS_SETTINGS_FILEPATH',
    'OreEncodingSettings',
    'get_global_settings',
    'get_settings_source',
]
