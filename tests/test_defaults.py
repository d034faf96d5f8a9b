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

from datetime import timedelta

import pytest
from snowflake.dsn import (
    Config,
    EmptyAccountError,
    EmptyPasswordError,
    EmptyUsernameError,
    fill_missing_parameters,
)


@pytest.mark.parametrize(
    "cfg, error, errno",
    [
        (Config(), EmptyAccountError, 260000),
        (Config(user="u"), EmptyAccountError, 260000),
        (Config(account="a"), EmptyUsernameError, 260001),
        (Config(account="a", password="p"), EmptyUsernameError, 260001),
        (Config(account="a", user="u"), EmptyPasswordError, 260002),
    ],
)
def test_mandatory_fields_are_checked_in_order(cfg, error, errno):
    with pytest.raises(error) as err:
        fill_missing_parameters(cfg)

    assert err.value.errno == errno


def test_validation_error_leaves_config_untouched():
    cfg = Config(account="a", user="u")

    with pytest.raises(EmptyPasswordError):
        fill_missing_parameters(cfg)

    assert cfg == Config(account="a", user="u")


def test_defaults_are_filled():
    cfg = Config(account="a", user="u", password="p")

    fill_missing_parameters(cfg)

    assert cfg.protocol == "https"
    assert cfg.port == 443
    assert cfg.login_timeout == timedelta(seconds=60)
    assert cfg.request_timeout == timedelta(0)
    assert cfg.application == "PythonDSN"
    assert cfg.authenticator == "snowflake"
    # host derivation is not part of defaulting
    assert cfg.host == ""
    assert cfg.schema == ""


def test_set_values_are_kept():
    cfg = Config(
        account="a",
        user="u",
        password="p",
        protocol="http",
        port=8080,
        login_timeout=timedelta(seconds=5),
        request_timeout=timedelta(seconds=7),
        application="my_app",
        authenticator="okta",
    )
    expected = cfg.clone()

    fill_missing_parameters(cfg)

    assert cfg == expected


@pytest.mark.parametrize(
    "host, region, expected_host",
    [
        (
            "a.snowflakecomputing.com",
            "us-east-1",
            "a.us-east-1.snowflakecomputing.com",
        ),
        (
            "a.us-east-1.snowflakecomputing.com",
            "us-east-1",
            "a.us-east-1.snowflakecomputing.com",
        ),
        (
            "a.eu-west-1.snowflakecomputing.com",
            "us-east-1",
            "a.eu-west-1.us-east-1.snowflakecomputing.com",
        ),
        ("localhost", "us-east-1", "localhost"),
        (".snowflakecomputing.com", "us-east-1", ".snowflakecomputing.com"),
        ("a.snowflakecomputing.com", "", "a.snowflakecomputing.com"),
    ],
)
def test_region_is_reconciled_with_host(host, region, expected_host):
    cfg = Config(account="a", user="u", password="p", host=host, region=region)

    fill_missing_parameters(cfg)

    assert cfg.host == expected_host


def test_defaulting_is_idempotent():
    cfg = Config(
        account="a",
        user="u",
        password="p",
        host="a.snowflakecomputing.com",
        region="us-east-1",
    )

    fill_missing_parameters(cfg)
    once = cfg.clone()
    fill_missing_parameters(cfg)

    assert cfg == once
