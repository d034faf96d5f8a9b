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

DOMAIN_SUFFIX = "snowflakecomputing.com"
DOTTED_DOMAIN_SUFFIX = "." + DOMAIN_SUFFIX

DEFAULT_PROTOCOL = "https"
DEFAULT_PORT = 443
DEFAULT_SCHEMA = "public"

DEFAULT_LOGIN_TIMEOUT = timedelta(seconds=60)
DEFAULT_REQUEST_TIMEOUT = timedelta(seconds=0)
DEFAULT_AUTHENTICATOR = "snowflake"

# Client identifier reported when no application is given.
CLIENT_TYPE = "PythonDSN"

# Query-string keys understood by the parser
ACCOUNT_KEY = "account"
WAREHOUSE_KEY = "warehouse"
DATABASE_KEY = "database"
SCHEMA_KEY = "schema"
ROLE_KEY = "role"
REGION_KEY = "region"
PROTOCOL_KEY = "protocol"
PASSCODE_KEY = "passcode"
PASSCODE_IN_PASSWORD_KEY = "passcodeInPassword"
LOGIN_TIMEOUT_KEY = "loginTimeout"
REQUEST_TIMEOUT_KEY = "requestTimeout"
APPLICATION_KEY = "application"
AUTHENTICATOR_KEY = "authenticator"
INSECURE_MODE_KEY = "insecureMode"
PROXY_HOST_KEY = "proxyHost"
PROXY_PORT_KEY = "proxyPort"
PROXY_USER_KEY = "proxyUser"
PROXY_PASSWORD_KEY = "proxyPassword"

KNOWN_PARAM_KEYS = frozenset(
    (
        ACCOUNT_KEY,
        WAREHOUSE_KEY,
        DATABASE_KEY,
        SCHEMA_KEY,
        ROLE_KEY,
        REGION_KEY,
        PROTOCOL_KEY,
        PASSCODE_KEY,
        PASSCODE_IN_PASSWORD_KEY,
        LOGIN_TIMEOUT_KEY,
        REQUEST_TIMEOUT_KEY,
        APPLICATION_KEY,
        AUTHENTICATOR_KEY,
        INSECURE_MODE_KEY,
        PROXY_HOST_KEY,
        PROXY_PORT_KEY,
        PROXY_USER_KEY,
        PROXY_PASSWORD_KEY,
    )
)
