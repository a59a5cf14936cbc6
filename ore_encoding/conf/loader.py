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

"""
Reading settings from YAML files.

A settings file may name another one under the `extends` key. The file it names is loaded first (relative to the
extending file, falling back to the bundled `conf` directory) and the extending file's keys override it, nested
mappings being merged key by key.
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ore_encoding.conf.settings import OreEncodingSettings

EXTENDS_KEY = 'extends'

BUNDLED_CONF_DIR = Path(__file__).parent


def merge_settings_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """ Return a new dict with `override` applied on top of `base`, neither input is modified.

    >>> base = dict(a=1, nested=dict(b=2, c=3))
    >>> merge_settings_dicts(base, dict(nested=dict(c=4), d=5)) == dict(a=1, nested=dict(b=2, c=4), d=5)
    True
    >>> base == dict(a=1, nested=dict(b=2, c=3))
    True
    """
    merged = deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_settings_dicts(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged


def read_yaml_dict(filepath: Union[Path, str]) -> dict[str, Any]:
    """ Read a yaml file that must hold a mapping, an empty file is an empty mapping.
    """
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def read_extended_yaml_dict(
    filepath: Union[Path, str],
    *,
    custom_root: Optional[Path] = BUNDLED_CONF_DIR,
    _seen: frozenset[Path] = frozenset(),
) -> dict[str, Any]:
    """ Read a yaml settings file resolving its `extends` chain.

    The `extends` key itself is not part of the result.
    """
    path = Path(filepath).resolve()
    if path in _seen:
        raise ValueError(f"'{filepath}' extends itself")

    contents = read_yaml_dict(path)
    parent = contents.pop(EXTENDS_KEY, None)
    if not parent:
        return contents

    parent_path = path.parent / str(parent)
    if not parent_path.is_file() and custom_root is not None:
        parent_path = custom_root / str(parent)

    base = read_extended_yaml_dict(parent_path, custom_root=custom_root, _seen=_seen | {path})
    return merge_settings_dicts(base, contents)


def load_yaml_settings(filepath: Union[Path, str]) -> OreEncodingSettings:
    """ Load and validate the settings in a yaml file.
    """
    return OreEncodingSettings.model_validate(read_extended_yaml_dict(filepath))
