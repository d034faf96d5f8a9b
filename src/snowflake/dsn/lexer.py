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

"""
Splits a DSN into its segments:

    user[:password]@account/database/schema[?param1=value1&paramN=valueN]
    user[:password]@account/database[?param1=value1&paramN=valueN]
    user[:password]@host:port[?param1=value1&paramN=valueN]

Boundaries are searched from the end of the string, so credentials may
contain characters that also act as delimiters further right.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

from snowflake.dsn.constants import DEFAULT_PORT, DOMAIN_SUFFIX, DOTTED_DOMAIN_SUFFIX
from snowflake.dsn.escaping import cast_to_int
from snowflake.dsn.exceptions import FailedToParsePortError

NOT_FOUND = -1


class Cursor:
    """Read-only view over the DSN text with bounded delimiter lookups."""

    def __init__(self, text: str):
        self.text = text

    def __len__(self) -> int:
        return len(self.text)

    def rfind(self, char: str, end: Optional[int] = None) -> int:
        """Index of the last ``char`` strictly before ``end``, or NOT_FOUND."""
        if end is None:
            end = len(self.text)
        return self.text.rfind(char, 0, max(end, 0))

    def find(self, char: str, start: int, end: Optional[int] = None) -> int:
        """Index of the first ``char`` in ``[start, end)``, or NOT_FOUND."""
        if end is None:
            end = len(self.text)
        return self.text.find(char, max(start, 0), end)

    def slice(self, start: int, end: int) -> str:
        return self.text[start:end]


class DSNSegments(NamedTuple):
    at: int
    """Position of the '@' closing the credentials, NOT_FOUND if absent."""
    target_end: int
    """End (exclusive) of the account or host:port segment."""
    first_slash: int
    last_slash: int
    """Slash positions, both NOT_FOUND when the DSN has no path."""
    query_start: int
    """Position of the '?' opening the query string, len(dsn) if absent."""
    has_target: bool
    """False when the DSN starts with '/' and no target can be read."""

    @property
    def has_path(self) -> bool:
        return self.last_slash != NOT_FOUND

    @property
    def has_schema(self) -> bool:
        return self.first_slash != self.last_slash


class TargetSegment(NamedTuple):
    region: str
    account: str
    host: str
    port: int


def locate_segments(cursor: Cursor) -> DSNSegments:
    last_slash = cursor.rfind("/")
    if last_slash == NOT_FOUND:
        return _locate_segments_without_path(cursor)

    query_start = _query_start(cursor, last_slash + 1)
    if last_slash == 0:
        return DSNSegments(
            at=NOT_FOUND,
            target_end=0,
            first_slash=0,
            last_slash=0,
            query_start=query_start,
            has_target=False,
        )

    at = cursor.rfind("@", last_slash)
    # the leftmost slash between credentials and the last slash splits
    # database from schema
    first_slash = cursor.find("/", at + 1, last_slash)
    if first_slash == NOT_FOUND:
        first_slash = last_slash
    return DSNSegments(
        at=at,
        target_end=first_slash,
        first_slash=first_slash,
        last_slash=last_slash,
        query_start=query_start,
        has_target=True,
    )


def _locate_segments_without_path(cursor: Cursor) -> DSNSegments:
    at = cursor.rfind("@")
    query_start = _query_start(cursor, at + 1)
    return DSNSegments(
        at=at,
        target_end=query_start,
        first_slash=NOT_FOUND,
        last_slash=NOT_FOUND,
        query_start=query_start,
        has_target=True,
    )


def _query_start(cursor: Cursor, start: int) -> int:
    position = cursor.find("?", start)
    return len(cursor) if position == NOT_FOUND else position


def split_user_password(cursor: Cursor, at: int) -> Tuple[str, str]:
    colon = cursor.find(":", 0, at)
    if colon == NOT_FOUND:
        return cursor.slice(0, at), ""
    return cursor.slice(0, colon), cursor.slice(colon + 1, at)


def parse_account_host_port(cursor: Cursor, at: int, end: int) -> TargetSegment:
    """
    Reads the segment between ``at`` and ``end`` either as ``host:port`` or,
    when it has no port and is not a Snowflake host name, as an account name.
    """
    region, account, port = "", "", 0
    colon = cursor.find(":", at + 1, end)
    if colon == NOT_FOUND:
        host = cursor.slice(at + 1, end)
    else:
        port_text = cursor.slice(colon + 1, end)
        try:
            port = cast_to_int(port_text)
        except ValueError:
            raise FailedToParsePortError(port_text)
        host = cursor.slice(at + 1, colon)

    if port == 0 and not host.endswith(DOMAIN_SUFFIX):
        account = host
        host = account + DOTTED_DOMAIN_SUFFIX
        port = DEFAULT_PORT
        region, account = split_account_region(account, region)
    return TargetSegment(region=region, account=account, host=host, port=port)


def split_account_region(account: str, region: str = "") -> Tuple[str, str]:
    """Returns (region, account) for an ``account.region`` name."""
    dot = account.find(".")
    if dot > 0:
        return account[dot + 1 :], account[:dot]
    return region, account
