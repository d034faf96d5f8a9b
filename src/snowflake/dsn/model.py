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

from dataclasses import dataclass, field, fields, replace
from datetime import timedelta
from typing import Any, Dict

from snowflake.dsn.escaping import cast_to_bool, cast_to_int
from snowflake.dsn.exceptions import InvalidConnectionConfigurationError

_PROXY_PREFIX = "proxy_"
_BOOL_FIELDS = ("passcode_in_password", "insecure_mode")
_TIMEOUT_FIELDS = ("login_timeout", "request_timeout")


@dataclass
class ProxySettings:
    """Outbound proxy used by the driver, carried per Config."""

    host: str = ""
    port: int = 0
    user: str = ""
    password: str = field(default="", repr=False)

    def is_set(self) -> bool:
        return self.host != ""


@dataclass
class Config:
    account: str = ""
    user: str = ""
    password: str = field(default="", repr=False)
    region: str = ""

    protocol: str = ""
    host: str = ""
    port: int = 0

    database: str = ""
    schema: str = ""
    warehouse: str = ""
    role: str = ""

    authenticator: str = ""
    passcode: str = field(default="", repr=False)
    passcode_in_password: bool = False

    login_timeout: timedelta = timedelta(0)
    request_timeout: timedelta = timedelta(0)

    application: str = ""
    insecure_mode: bool = False
    # connection parameters not otherwise modeled
    params: Dict[str, str] = field(default_factory=dict)
    proxy: ProxySettings = field(default_factory=ProxySettings)

    def clone(self) -> Config:
        return replace(self, params=dict(self.params), proxy=replace(self.proxy))

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> Config:
        """
        Builds a Config from flat snake_case settings, as stored in
        connections.toml. Keys that are not Config fields end up in ``params``.
        """
        known = {f.name for f in fields(cls)} - {"params", "proxy"}
        proxy_fields = {f.name for f in fields(ProxySettings)}
        cfg = cls()
        for key, value in config_dict.items():
            if value is None:
                continue
            if key in known:
                setattr(cfg, key, _convert(key, value))
            elif (
                key.startswith(_PROXY_PREFIX)
                and key[len(_PROXY_PREFIX) :] in proxy_fields
            ):
                proxy_key = key[len(_PROXY_PREFIX) :]
                setattr(cfg.proxy, proxy_key, _convert(proxy_key, value))
            elif key == "params" and isinstance(value, dict):
                cfg.params.update({k: _to_str(v) for k, v in value.items()})
            else:
                cfg.params[key] = _to_str(value)
        return cfg

    def to_dict(self) -> Dict[str, Any]:
        """Non-empty known values, timeouts expressed in whole seconds."""
        result: Dict[str, Any] = {}
        for f in fields(self):
            if f.name in ("params", "proxy"):
                continue
            value = getattr(self, f.name)
            if isinstance(value, timedelta):
                value = int(value.total_seconds())
            if not value:
                continue
            result[f.name] = value
        for f in fields(self.proxy):
            value = getattr(self.proxy, f.name)
            if value:
                result[_PROXY_PREFIX + f.name] = value
        if self.params:
            result["params"] = dict(self.params)
        return result


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _convert(key: str, value: Any) -> Any:
    try:
        if key in _BOOL_FIELDS:
            return cast_to_bool(value)
        if key in _TIMEOUT_FIELDS:
            if isinstance(value, timedelta):
                return value
            return timedelta(seconds=cast_to_int(value))
        if key == "port":
            return cast_to_int(value)
    except (ValueError, OverflowError):
        raise InvalidConnectionConfigurationError(
            f"Value of {key} is not valid: {value!r}"
        )
    return str(value)
