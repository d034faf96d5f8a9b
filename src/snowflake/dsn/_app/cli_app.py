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
import sys
from datetime import timedelta
from pathlib import Path
from typing import List, Optional

import typer
from click import ClickException
from snowflake.dsn import __about__
from snowflake.dsn._app.loggers import create_loggers
from snowflake.dsn._app.printing import (
    OutputFormat,
    mask_sensitive_parameters,
    print_message,
    print_object,
)
from snowflake.dsn.config import get_connection_config
from snowflake.dsn.model import Config
from snowflake.dsn.parser import parse_dsn
from snowflake.dsn.serializer import build_dsn

log = logging.getLogger(__name__)

DEFAULT_CONTEXT_SETTINGS = {"help_option_names": ["--help", "-h"]}
_CLI_BEHAVIOUR = "Global configuration"
_CONNECTION_SECTION = "Connection configuration"

VerboseOption = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Displays log entries for log levels `info` and higher.",
    is_flag=True,
    rich_help_panel=_CLI_BEHAVIOUR,
)

DebugOption = typer.Option(
    False,
    "--debug",
    help="Displays log entries for log levels `debug` and higher; debug logs contain additional information.",
    is_flag=True,
    rich_help_panel=_CLI_BEHAVIOUR,
)

FormatOption = typer.Option(
    OutputFormat.TABLE,
    "--format",
    help="Specifies the output format.",
    case_sensitive=False,
)


def _handle_exception(exception: Exception, debug: bool):
    if debug:
        raise exception
    print(
        "\nAn unexpected exception occurred. Use --debug option to see the traceback. Exception message:\n\n"
        + exception.__str__(),
        file=sys.stderr,
    )
    raise SystemExit(1)


class DSNMainTyper(typer.Typer):
    """
    Top-level Typer of snow-dsn.
    It contains global exception handling.
    """

    def __init__(self):
        super().__init__(
            context_settings=DEFAULT_CONTEXT_SETTINGS,
            pretty_exceptions_show_locals=False,
            add_completion=False,
            no_args_is_help=True,
        )

    def __call__(self, *args, **kwargs):
        # Typer does not let us peek at the flag before the command runs
        debug = "--debug" in sys.argv
        try:
            super().__call__(*args, **kwargs)
        except Exception as exception:
            _handle_exception(exception, debug)


app = DSNMainTyper()


def _version_callback(value: bool):
    if value:
        print_message(f"snow-dsn version: {__about__.VERSION}")
        raise typer.Exit()


@app.callback()
def default(
    verbose: bool = VerboseOption,
    debug: bool = DebugOption,
    version: bool = typer.Option(
        False,
        "--version",
        help="Shows version of snow-dsn.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel=_CLI_BEHAVIOUR,
    ),
):
    """
    Translates between Snowflake DSN strings and connection settings.
    """
    create_loggers(verbose=verbose, debug=debug)


@app.command(name="parse")
def parse_command(
    dsn: str = typer.Argument(..., help="DSN to parse."),
    output_format: OutputFormat = FormatOption,
):
    """
    Parses a DSN and shows the resulting connection settings.
    """
    cfg = parse_dsn(dsn)
    print_object(mask_sensitive_parameters(cfg.to_dict()), output_format)


def _parse_key_value(values: Optional[List[str]]) -> dict:
    result = {}
    for value in values or []:
        key, sep, param_value = value.partition("=")
        if not sep or not key:
            raise ClickException(f"Expected key=value, got {value!r}")
        result[key] = param_value
    return result


@app.command(name="build")
def build_command(
    account: str = typer.Option(
        ..., "--account", help="Name assigned to your Snowflake account."
    ),
    user: str = typer.Option(..., "--user", help="Username to connect to Snowflake."),
    password: str = typer.Option(
        ..., "--password", help="Snowflake password.", hide_input=True
    ),
    host: str = typer.Option(
        "", "--host", help="Host address.", rich_help_panel=_CONNECTION_SECTION
    ),
    port: int = typer.Option(
        0, "--port", help="Port number.", rich_help_panel=_CONNECTION_SECTION
    ),
    region: str = typer.Option(
        "", "--region", help="Account region.", rich_help_panel=_CONNECTION_SECTION
    ),
    protocol: str = typer.Option(
        "", "--protocol", help="http or https.", rich_help_panel=_CONNECTION_SECTION
    ),
    database: str = typer.Option("", "--database", "--dbname", help="Database."),
    schema: str = typer.Option("", "--schema", "--schemaname", help="Schema."),
    warehouse: str = typer.Option("", "--warehouse", help="Warehouse."),
    role: str = typer.Option("", "--role", "--rolename", help="Role."),
    authenticator: str = typer.Option(
        "", "--authenticator", help="Snowflake authenticator."
    ),
    application: str = typer.Option("", "--application", help="Client identifier."),
    login_timeout: int = typer.Option(
        0, "--login-timeout", help="Login timeout in seconds."
    ),
    request_timeout: int = typer.Option(
        0, "--request-timeout", help="Request timeout in seconds."
    ),
    param: Optional[List[str]] = typer.Option(
        None,
        "--param",
        help="Additional connection parameter in key=value form. Can be repeated.",
    ),
):
    """
    Builds a DSN from connection settings.
    """
    cfg = Config(
        account=account,
        user=user,
        password=password,
        host=host,
        port=port,
        region=region,
        protocol=protocol,
        database=database,
        schema=schema,
        warehouse=warehouse,
        role=role,
        authenticator=authenticator,
        application=application,
        login_timeout=timedelta(seconds=login_timeout),
        request_timeout=timedelta(seconds=request_timeout),
        params=_parse_key_value(param),
    )
    print_message(build_dsn(cfg))


@app.command(name="connection")
def connection_command(
    name: str = typer.Argument(..., help="Name of the connection."),
    connections_file: Optional[Path] = typer.Option(
        None,
        "--connections-file",
        help="Specifies connections.toml file that should be used.",
        exists=True,
        dir_okay=False,
    ),
):
    """
    Builds the DSN of a connection defined in connections.toml.
    """
    cfg = get_connection_config(name, connections_file)
    log.info("Building DSN for connection %s", name)
    print_message(build_dsn(cfg))
