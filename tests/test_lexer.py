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

import pytest
from snowflake.dsn.exceptions import FailedToParsePortError
from snowflake.dsn.lexer import (
    NOT_FOUND,
    Cursor,
    DSNSegments,
    TargetSegment,
    locate_segments,
    parse_account_host_port,
    split_account_region,
    split_user_password,
)


def test_cursor_lookups_are_bounded():
    cursor = Cursor("a/b/c?d/e")

    assert cursor.rfind("/") == 7
    assert cursor.rfind("/", 7) == 3
    assert cursor.rfind("/", 1) == NOT_FOUND
    assert cursor.find("/", 2) == 3
    assert cursor.find("/", 4, 7) == NOT_FOUND
    assert cursor.slice(4, 5) == "c"
    assert len(cursor) == 9


@pytest.mark.parametrize(
    "dsn, expected",
    [
        (
            "user:pass@acc/db/sch?warehouse=wh",
            DSNSegments(
                at=9,
                target_end=13,
                first_slash=13,
                last_slash=16,
                query_start=20,
                has_target=True,
            ),
        ),
        (
            "u:p@acc/db",
            DSNSegments(
                at=3,
                target_end=7,
                first_slash=7,
                last_slash=7,
                query_start=10,
                has_target=True,
            ),
        ),
        (
            "u:p@acc?x=1",
            DSNSegments(
                at=3,
                target_end=7,
                first_slash=NOT_FOUND,
                last_slash=NOT_FOUND,
                query_start=7,
                has_target=True,
            ),
        ),
        (
            "u:p@acc/a/b/c",
            DSNSegments(
                at=3,
                target_end=7,
                first_slash=7,
                last_slash=11,
                query_start=13,
                has_target=True,
            ),
        ),
        (
            "/db?x=1",
            DSNSegments(
                at=NOT_FOUND,
                target_end=0,
                first_slash=0,
                last_slash=0,
                query_start=3,
                has_target=False,
            ),
        ),
        (
            "?account=acc",
            DSNSegments(
                at=NOT_FOUND,
                target_end=0,
                first_slash=NOT_FOUND,
                last_slash=NOT_FOUND,
                query_start=0,
                has_target=True,
            ),
        ),
    ],
)
def test_locate_segments(dsn, expected):
    assert locate_segments(Cursor(dsn)) == expected


def test_credentials_end_at_last_at_sign_before_path():
    dsn = "u:p@ss@acc/db"
    segments = locate_segments(Cursor(dsn))

    assert segments.at == 6
    assert split_user_password(Cursor(dsn), segments.at) == ("u", "p@ss")


@pytest.mark.parametrize(
    "credentials, expected",
    [
        ("user:pass@", ("user", "pass")),
        ("user:pa:ss@", ("user", "pa:ss")),
        ("user@", ("user", "")),
        (":pass@", ("", "pass")),
        ("@", ("", "")),
    ],
)
def test_split_user_password(credentials, expected):
    cursor = Cursor(credentials + "acc")
    assert split_user_password(cursor, len(credentials) - 1) == expected


@pytest.mark.parametrize(
    "segment, expected",
    [
        (
            "acc",
            TargetSegment(
                region="", account="acc", host="acc.snowflakecomputing.com", port=443
            ),
        ),
        (
            "ab.us-east-1",
            TargetSegment(
                region="us-east-1",
                account="ab",
                host="ab.us-east-1.snowflakecomputing.com",
                port=443,
            ),
        ),
        ("ab:5432", TargetSegment(region="", account="", host="ab", port=5432)),
        (
            "acc.snowflakecomputing.com",
            TargetSegment(
                region="", account="", host="acc.snowflakecomputing.com", port=0
            ),
        ),
        (
            "acc.snowflakecomputing.com:8443",
            TargetSegment(
                region="", account="", host="acc.snowflakecomputing.com", port=8443
            ),
        ),
        (
            "acc:0",
            TargetSegment(
                region="", account="acc", host="acc.snowflakecomputing.com", port=443
            ),
        ),
        (
            "",
            TargetSegment(
                region="", account="", host=".snowflakecomputing.com", port=443
            ),
        ),
    ],
)
def test_parse_account_host_port(segment, expected):
    cursor = Cursor(segment)
    assert parse_account_host_port(cursor, NOT_FOUND, len(segment)) == expected


def test_parse_account_host_port_respects_bounds():
    dsn = "u:p@localhost:8080/db"
    assert parse_account_host_port(Cursor(dsn), 3, 18) == TargetSegment(
        region="", account="", host="localhost", port=8080
    )


@pytest.mark.parametrize(
    "port",
    [
        "abc",
        "",
        "80a",
        "8.0",
        " 80",
        "9223372036854775808",
        pytest.param("1" * 5000, id="too-many-digits"),
    ],
)
def test_parse_account_host_port_fails_on_bad_port(port):
    segment = f"localhost:{port}"
    with pytest.raises(FailedToParsePortError) as err:
        parse_account_host_port(Cursor(segment), NOT_FOUND, len(segment))

    assert err.value.port == port
    assert err.value.errno == 260004
    assert "failed to parse a port number" in err.value.message


@pytest.mark.parametrize(
    "account, expected",
    [
        ("acc", ("", "acc")),
        ("acc.eu-west-1", ("eu-west-1", "acc")),
        ("acc.eu-west-1.aws", ("eu-west-1.aws", "acc")),
        (".acc", ("", ".acc")),
    ],
)
def test_split_account_region(account, expected):
    assert split_account_region(account) == expected
