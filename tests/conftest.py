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

from collections import Counter
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import parse_qsl

import pytest
from snowflake.dsn._app.cli_app import app
from snowflake.dsn._app.loggers import create_loggers
from typer.testing import CliRunner

TEST_DIR = Path(__file__).parent


class DSNRunner(CliRunner):
    def __init__(self, app):
        super().__init__()
        self.app = app

    def invoke(self, *a, **kw):
        kw.update(catch_exceptions=False)
        return super().invoke(self.app, *a, **kw)


@pytest.fixture(autouse=True)
def reset_logging_levels():
    # CLI commands reconfigure logging, keep every test starting from the same state
    create_loggers(verbose=False, debug=False)
    yield


@pytest.fixture
def runner():
    yield DSNRunner(app)


@pytest.fixture
def test_connections_file(tmp_path):
    connections_file = tmp_path / "connections.toml"
    connections_file.write_text((TEST_DIR / "test_data" / "connections.toml").read_text())
    connections_file.chmod(0o600)
    yield connections_file


@pytest.fixture
def connections_file(tmp_path):
    @contextmanager
    def _connections_file(content: str = ""):
        p = tmp_path / "custom_connections.toml"
        p.write_text(content)
        p.chmod(0o600)
        yield p

    return _connections_file


def split_dsn(dsn: str):
    """Splits a built DSN into its fixed prefix and the multiset of decoded query pairs."""
    prefix, _, query = dsn.partition("?")
    return prefix, Counter(parse_qsl(query, keep_blank_values=True))


@pytest.fixture
def assert_dsn_equal():
    def _assert(actual: str, expected: str):
        assert split_dsn(actual) == split_dsn(expected)

    return _assert
