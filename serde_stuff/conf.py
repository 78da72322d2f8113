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
from pathlib import Path
from typing import Any, NamedTuple, Optional, Union

import yaml

from serde_stuff.model import BaseModel

CONFIG_YAML_ENV = 'SERDE_STUFF_CONFIG_YAML'


class SerdeSettings(BaseModel):
    # Write `=` padding when encoding base64
    BASE64_PADDING: bool = True

    # Accept base64 text whose `=` padding was stripped
    BASE64_ACCEPT_UNPADDED: bool = False


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: SerdeSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Takes a filepath to a yaml file and returns a dictionary with its contents."""
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a file")

    with open(filepath, 'r') as file:
        contents = yaml.safe_load(file)

        if contents is None:
            return {}

        if not isinstance(contents, dict):
            raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")

        return contents


def load_yaml_settings(filepath: Union[Path, str]) -> SerdeSettings:
    """Load settings from a yaml file and return a validated instance."""
    return SerdeSettings.model_validate(dict_from_yaml(filepath=filepath))


def get_settings() -> SerdeSettings:
    """ Return the process-wide settings.
        The yaml file is taken from the environment variable 'SERDE_STUFF_CONFIG_YAML'.
        If not set the defaults are used.
    """
    global _settings_singleton

    source = os.environ.get(CONFIG_YAML_ENV)

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')
        return _settings_singleton.settings

    settings = load_yaml_settings(source) if source is not None else SerdeSettings()
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings


def reset_settings() -> None:
    """Forget the loaded settings, the next `get_settings()` call loads them again."""
    global _settings_singleton
    _settings_singleton = None
