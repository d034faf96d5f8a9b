# Copyright (c) 2024 Snowflake Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import tomlkit
from snowflake.connector.constants import CONNECTIONS_FILE
from snowflake.dsn.exceptions import (
    InvalidConnectionConfigurationError,
    MissingConfigurationError,
)
from snowflake.dsn.model import Config
from tomlkit.exceptions import ParseError
from tomlkit.items import Table

log = logging.getLogger(__name__)

CONNECTIONS_SECTION = "connections"
_ENV_PREFIX = "SNOWFLAKE"


def get_connections_file(path: Optional[Path] = None) -> Path:
    return Path(path) if path else Path(CONNECTIONS_FILE)


def load_connections(path: Optional[Path] = None) -> Dict[str, dict]:
    """
    Reads every connection table from connections.toml.
    A missing file means no connections are configured.
    """
    connections_file = get_connections_file(path)
    if not connections_file.exists():
        log.debug("Connections file %s does not exist", connections_file)
        return {}

    log.info("Reading connections from %s", connections_file)
    try:
        document = tomlkit.parse(connections_file.read_text())
    except ParseError as err:
        raise InvalidConnectionConfigurationError(
            f"Connections file {connections_file} seems to be corrupted. {err}"
        )
    return {
        name: section.unwrap()
        for name, section in document.items()
        if isinstance(section, Table)
    }


def get_connection_dict(name: str, path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Looks for the named connection in connections.toml, with values from
    SNOWFLAKE_CONNECTIONS_<NAME>_<KEY> environment variables taking precedence.
    """
    connection = load_connections(path).get(name)
    env_variables = _get_envs_for_path(CONNECTIONS_SECTION, name)
    if connection is None and not env_variables:
        raise MissingConfigurationError(f"Connection {name} is not configured")

    result = dict(connection or {})
    result.update(env_variables)
    return result


def get_connection_config(name: str, path: Optional[Path] = None) -> Config:
    return Config.from_dict(get_connection_dict(name, path))


def _get_envs_for_path(*path) -> Dict[str, str]:
    env_variables_prefix = "_".join([_ENV_PREFIX, *(p.upper() for p in path)]) + "_"
    return {
        k.replace(env_variables_prefix, "").lower(): os.environ[k]
        for k in os.environ.keys()
        if k.startswith(env_variables_prefix)
    }
