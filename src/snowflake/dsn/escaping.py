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

import re
from typing import Any
from urllib.parse import quote_plus, unquote_plus, unquote_to_bytes

from snowflake.dsn.exceptions import InvalidEscapeSequenceError

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_KNOWN_BOOLEANS = {
    "1": True,
    "t": True,
    "T": True,
    "true": True,
    "True": True,
    "TRUE": True,
    "0": False,
    "f": False,
    "F": False,
    "false": False,
    "False": False,
    "FALSE": False,
}


def query_escape(value: str) -> str:
    return quote_plus(value, safe="")


def query_unescape(value: str) -> str:
    """
    Decodes a form-encoded value. Unlike urllib, a '%' that is not followed
    by two hex digits is an error instead of being kept as-is, and so are
    escapes that do not decode to UTF-8.
    """
    bad = _BAD_ESCAPE.search(value)
    if bad:
        raise InvalidEscapeSequenceError(value[bad.start() : bad.start() + 3])
    try:
        return unquote_plus(value, errors="strict")
    except UnicodeDecodeError:
        raise InvalidEscapeSequenceError(_first_undecodable_run(value))


def _first_undecodable_run(value: str) -> str:
    for run in _ESCAPE_RUN.finditer(value):
        try:
            unquote_to_bytes(run.group()).decode("utf-8")
        except UnicodeDecodeError:
            return run.group()
    return value


def is_integer(value: str) -> bool:
    return _INTEGER.fullmatch(value) is not None


def cast_to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value

    # Now if value is not string then cast it to str. Simplifies logic for 1 and 0
    if not isinstance(value, str):
        value = str(value)

    if value not in _KNOWN_BOOLEANS:
        raise ValueError(f"Could not cast {value} to bool value")
    return _KNOWN_BOOLEANS[value]


def cast_to_int(value: Any) -> int:
    """Accepts ints and decimal strings that fit in a signed 64-bit integer."""
    if isinstance(value, bool):
        raise ValueError(f"Could not cast {value} to int value")
    if isinstance(value, str) and is_integer(value):
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"Could not cast {value} to int value")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"Value {value} is out of range")
    return value
