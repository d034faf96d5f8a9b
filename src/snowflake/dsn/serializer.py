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
from typing import List, Tuple

from snowflake.dsn import constants as c
from snowflake.dsn.defaults import fill_missing_parameters
from snowflake.dsn.escaping import query_escape
from snowflake.dsn.lexer import split_account_region
from snowflake.dsn.model import Config

log = logging.getLogger(__name__)


def build_dsn(cfg: Config) -> str:
    """
    Constructs the DSN of ``cfg``. Only settings that differ from their
    defaults are put in the query string. Proxy settings are never included.
    The given Config is not modified.
    """
    cfg = cfg.clone()
    if cfg.host == "":
        if cfg.region == "":
            cfg.host = cfg.account + c.DOTTED_DOMAIN_SUFFIX
        else:
            cfg.host = f"{cfg.account}.{cfg.region}{c.DOTTED_DOMAIN_SUFFIX}"
    # in case account includes region
    cfg.region, cfg.account = split_account_region(cfg.account, cfg.region)

    fill_missing_parameters(cfg)

    dsn = f"{cfg.user}:{cfg.password}@{cfg.host}:{cfg.port}"
    query = _encode(_non_default_params(cfg))
    if query:
        dsn += "?" + query
    log.debug("Built DSN for %s@%s:%s", cfg.user, cfg.host, cfg.port)
    return dsn


def _non_default_params(cfg: Config) -> List[Tuple[str, str]]:
    params: List[Tuple[str, str]] = []
    if not _account_in_host(cfg):
        params.append((c.ACCOUNT_KEY, cfg.account))
    if cfg.database:
        params.append((c.DATABASE_KEY, cfg.database))
    if cfg.schema:
        params.append((c.SCHEMA_KEY, cfg.schema))
    if cfg.warehouse:
        params.append((c.WAREHOUSE_KEY, cfg.warehouse))
    if cfg.role:
        params.append((c.ROLE_KEY, cfg.role))
    if cfg.region:
        params.append((c.REGION_KEY, cfg.region))
    if cfg.protocol != c.DEFAULT_PROTOCOL:
        params.append((c.PROTOCOL_KEY, cfg.protocol))
    if cfg.authenticator != c.DEFAULT_AUTHENTICATOR:
        params.append((c.AUTHENTICATOR_KEY, cfg.authenticator))
    if cfg.passcode:
        params.append((c.PASSCODE_KEY, cfg.passcode))
    if cfg.passcode_in_password:
        params.append((c.PASSCODE_IN_PASSWORD_KEY, "true"))
    if cfg.login_timeout != c.DEFAULT_LOGIN_TIMEOUT:
        params.append((c.LOGIN_TIMEOUT_KEY, _seconds(cfg.login_timeout)))
    if cfg.request_timeout != c.DEFAULT_REQUEST_TIMEOUT:
        params.append((c.REQUEST_TIMEOUT_KEY, _seconds(cfg.request_timeout)))
    if cfg.application != c.CLIENT_TYPE:
        params.append((c.APPLICATION_KEY, cfg.application))
    if cfg.insecure_mode:
        params.append((c.INSECURE_MODE_KEY, "true"))

    params.extend(
        (key, value)
        for key, value in cfg.params.items()
        if key not in c.KNOWN_PARAM_KEYS
    )
    return params


def _account_in_host(cfg: Config) -> bool:
    # the parser takes the account from the first label of a Snowflake host
    return (
        cfg.host.endswith(c.DOTTED_DOMAIN_SUFFIX)
        and cfg.host.split(".", 1)[0] == cfg.account
    )


def _seconds(value) -> str:
    return str(int(value.total_seconds()))


def _encode(params: List[Tuple[str, str]]) -> str:
    # sorted by key, values keep their order
    return "&".join(
        f"{query_escape(key)}={query_escape(value)}"
        for key, value in sorted(params, key=lambda pair: pair[0])
    )
