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

from snowflake.dsn.defaults import fill_missing_parameters
from snowflake.dsn.exceptions import (
    DSNError,
    DSNStructureError,
    DSNValidationError,
    EmptyAccountError,
    EmptyPasswordError,
    EmptyUsernameError,
    FailedToParsePortError,
    InvalidEscapeSequenceError,
    InvalidParameterValueError,
)
from snowflake.dsn.model import Config, ProxySettings
from snowflake.dsn.parser import parse_dsn
from snowflake.dsn.serializer import build_dsn

__all__ = [
    "Config",
    "ProxySettings",
    "build_dsn",
    "parse_dsn",
    "fill_missing_parameters",
    "DSNError",
    "DSNStructureError",
    "DSNValidationError",
    "EmptyAccountError",
    "EmptyPasswordError",
    "EmptyUsernameError",
    "FailedToParsePortError",
    "InvalidEscapeSequenceError",
    "InvalidParameterValueError",
]
