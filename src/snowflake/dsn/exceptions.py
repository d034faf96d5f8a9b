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

from typing import Optional

from click.exceptions import ClickException
from snowflake.dsn import errno


class DSNError(ClickException):
    """Base DSN Exception.

    Every error carries an ``errno`` so callers can tell failures apart
    without matching on messages.
    """

    errno: Optional[int] = None


class DSNStructureError(DSNError):
    """The DSN cannot be decomposed into its segments."""


class FailedToParsePortError(DSNStructureError):
    errno = errno.FAILED_TO_PARSE_PORT

    def __init__(self, port: str):
        self.port = port
        super().__init__(f"failed to parse a port number. port: {port}")


class InvalidEscapeSequenceError(DSNStructureError):
    errno = errno.INVALID_ESCAPE_SEQUENCE

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid URL escape in {text!r}")


class InvalidParameterValueError(DSNStructureError):
    errno = errno.INVALID_PARAMETER_VALUE

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"invalid value {value!r} for parameter {key}")


class DSNValidationError(DSNError):
    """The DSN decomposed fine but required fields are missing."""


class EmptyAccountError(DSNValidationError):
    errno = errno.EMPTY_ACCOUNT

    def __init__(self):
        super().__init__("account is empty")


class EmptyUsernameError(DSNValidationError):
    errno = errno.EMPTY_USERNAME

    def __init__(self):
        super().__init__("user is empty")


class EmptyPasswordError(DSNValidationError):
    errno = errno.EMPTY_PASSWORD

    def __init__(self):
        super().__init__("password is empty")


class MissingConfigurationError(ClickException):
    pass


class InvalidConnectionConfigurationError(ClickException):
    def format_message(self):
        return f"Invalid connection configuration. {self.message}"
