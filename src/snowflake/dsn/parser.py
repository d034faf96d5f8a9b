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
from datetime import timedelta
from typing import Callable, Dict

from snowflake.dsn import constants as c
from snowflake.dsn.defaults import fill_missing_parameters
from snowflake.dsn.escaping import cast_to_bool, cast_to_int, query_unescape
from snowflake.dsn.exceptions import InvalidParameterValueError
from snowflake.dsn.lexer import (
    Cursor,
    locate_segments,
    parse_account_host_port,
    split_user_password,
)
from snowflake.dsn.model import Config

log = logging.getLogger(__name__)

_SECRET_KEYS = (c.PASSCODE_KEY, c.PROXY_PASSWORD_KEY)


def parse_dsn(dsn: str) -> Config:
    """
    Parses a DSN string into a validated Config.

    The path segments win over ``database``/``schema`` query parameters.
    Database, schema, role and warehouse are decoded once more after
    defaulting, so a DSN carrying them unencoded in the path still works.
    """
    cfg = Config()
    cursor = Cursor(dsn)
    segments = locate_segments(cursor)

    if segments.has_target:
        if segments.at >= 0:
            cfg.user, cfg.password = split_user_password(cursor, segments.at)
        cfg.region, cfg.account, cfg.host, cfg.port = parse_account_host_port(
            cursor, segments.at, segments.target_end
        )

    if segments.query_start < len(cursor):
        parse_params(cfg, cursor.slice(segments.query_start + 1, len(cursor)))

    if segments.has_path:
        if segments.has_schema:
            cfg.database = cursor.slice(
                segments.first_slash + 1, segments.last_slash
            )
            cfg.schema = cursor.slice(segments.last_slash + 1, segments.query_start)
        else:
            cfg.database = cursor.slice(
                segments.last_slash + 1, segments.query_start
            )
            cfg.schema = c.DEFAULT_SCHEMA

    if cfg.account == "" and cfg.host.endswith(c.DOTTED_DOMAIN_SUFFIX):
        dot = cfg.host.find(".")
        if dot > 0:
            cfg.account = cfg.host[:dot]

    fill_missing_parameters(cfg)

    cfg.database = query_unescape(cfg.database)
    cfg.schema = query_unescape(cfg.schema)
    cfg.role = query_unescape(cfg.role)
    cfg.warehouse = query_unescape(cfg.warehouse)

    log.debug("Parsed DSN into %r", cfg)
    return cfg


def parse_params(cfg: Config, query: str) -> None:
    """
    Applies ``key=value&...`` pairs to ``cfg``. Values must be
    form-encoded; pieces without '=' are skipped.
    """
    log.debug("Query string: %s", _mask_query(query))
    for piece in query.split("&"):
        key, sep, raw_value = piece.partition("=")
        if not sep:
            continue
        value = query_unescape(raw_value)
        setter = _PARAM_SETTERS.get(key)
        if setter is None:
            cfg.params[key] = value
            continue
        try:
            setter(cfg, value)
        except (ValueError, OverflowError):
            raise InvalidParameterValueError(key, value)


def _mask_query(query: str) -> str:
    pieces = []
    for piece in query.split("&"):
        key, sep, _ = piece.partition("=")
        pieces.append(f"{key}=****" if sep and key in _SECRET_KEYS else piece)
    return "&".join(pieces)


def _set(name: str) -> Callable[[Config, str], None]:
    def setter(cfg: Config, value: str) -> None:
        setattr(cfg, name, value)

    return setter


def _set_proxy(name: str) -> Callable[[Config, str], None]:
    def setter(cfg: Config, value: str) -> None:
        setattr(cfg.proxy, name, value)

    return setter


def _set_bool(name: str) -> Callable[[Config, str], None]:
    def setter(cfg: Config, value: str) -> None:
        setattr(cfg, name, cast_to_bool(value))

    return setter


def _set_seconds(name: str) -> Callable[[Config, str], None]:
    def setter(cfg: Config, value: str) -> None:
        setattr(cfg, name, timedelta(seconds=cast_to_int(value)))

    return setter


def _set_proxy_port(cfg: Config, value: str) -> None:
    cfg.proxy.port = cast_to_int(value)


_PARAM_SETTERS: Dict[str, Callable[[Config, str], None]] = {
    c.ACCOUNT_KEY: _set("account"),
    c.WAREHOUSE_KEY: _set("warehouse"),
    c.DATABASE_KEY: _set("database"),
    c.SCHEMA_KEY: _set("schema"),
    c.ROLE_KEY: _set("role"),
    c.REGION_KEY: _set("region"),
    c.PROTOCOL_KEY: _set("protocol"),
    c.PASSCODE_KEY: _set("passcode"),
    c.PASSCODE_IN_PASSWORD_KEY: _set_bool("passcode_in_password"),
    c.LOGIN_TIMEOUT_KEY: _set_seconds("login_timeout"),
    c.REQUEST_TIMEOUT_KEY: _set_seconds("request_timeout"),
    c.APPLICATION_KEY: _set("application"),
    c.AUTHENTICATOR_KEY: _set("authenticator"),
    c.INSECURE_MODE_KEY: _set_bool("insecure_mode"),
    c.PROXY_HOST_KEY: _set_proxy("host"),
    c.PROXY_PORT_KEY: _set_proxy_port,
    c.PROXY_USER_KEY: _set_proxy("user"),
    c.PROXY_PASSWORD_KEY: _set_proxy("password"),
}
