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

from datetime import timedelta

from snowflake.dsn.constants import (
    CLIENT_TYPE,
    DEFAULT_AUTHENTICATOR,
    DEFAULT_LOGIN_TIMEOUT,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    DEFAULT_REQUEST_TIMEOUT,
    DOTTED_DOMAIN_SUFFIX,
)
from snowflake.dsn.exceptions import (
    EmptyAccountError,
    EmptyPasswordError,
    EmptyUsernameError,
)
from snowflake.dsn.model import Config


def fill_missing_parameters(cfg: Config) -> None:
    """
    Validates mandatory fields and fills unset optional ones in place.

    The steps run in a fixed order: mandatory checks first, then protocol and
    port, then region reconciliation (which reads the host), then the
    remaining defaults. Running it twice gives the same result as once.
    """
    if cfg.account == "":
        raise EmptyAccountError()
    if cfg.user == "":
        raise EmptyUsernameError()
    if cfg.password == "":
        raise EmptyPasswordError()

    if cfg.protocol == "":
        cfg.protocol = DEFAULT_PROTOCOL
    if cfg.port == 0:
        cfg.port = DEFAULT_PORT

    if cfg.region != "":
        cfg.host = _host_with_region(cfg.host, cfg.region)

    if cfg.login_timeout == timedelta(0):
        cfg.login_timeout = DEFAULT_LOGIN_TIMEOUT
    if cfg.request_timeout == timedelta(0):
        cfg.request_timeout = DEFAULT_REQUEST_TIMEOUT
    if cfg.application == "":
        cfg.application = CLIENT_TYPE
    if cfg.authenticator == "":
        cfg.authenticator = DEFAULT_AUTHENTICATOR


def _host_with_region(host: str, region: str) -> str:
    # region is specified but not included in host
    i = host.find(DOTTED_DOMAIN_SUFFIX)
    if i < 1:
        return host
    host_prefix = host[:i]
    if host_prefix.endswith(region):
        return host
    return f"{host_prefix}.{region}{DOTTED_DOMAIN_SUFFIX}"
