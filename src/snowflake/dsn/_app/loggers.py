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
import logging.config
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

import typer

DSN_LOGGER = "snowflake.dsn"
# parent of the connector loggers
CONNECTOR_LOGGER = "snowflake"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_FORMATS = {
    "short": "%(asctime)s %(levelname)s %(message)s",
    "detailed": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
}


@dataclass
class LoggerConfig:
    level: int = logging.NOTSET
    handlers: List[str] = field(default_factory=list)
    propagate: bool = True


@dataclass
class ConsoleLoggingConfig:
    """Everything goes to stderr; only the level and the format change."""

    level: int = logging.ERROR
    formatter: str = "short"
    loggers: Dict[str, LoggerConfig] = field(
        default_factory=lambda: {
            DSN_LOGGER: LoggerConfig(handlers=["console"], propagate=False),
            CONNECTOR_LOGGER: LoggerConfig(),
        }
    )

    def to_dict_config(self) -> Dict[str, Any]:
        for logger in self.loggers.values():
            logger.level = self.level
        return {
            "version": 1,
            "disable_existing_loggers": True,
            "formatters": {
                name: {"format": fmt, "datefmt": _DATE_FORMAT}
                for name, fmt in _FORMATS.items()
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": self.formatter,
                    "level": self.level,
                }
            },
            "loggers": {name: asdict(cfg) for name, cfg in self.loggers.items()},
        }


def create_loggers(verbose: bool, debug: bool):
    """Configures logging from the global flags.
    verbose == True - info and higher
    debug == True - debug and higher, with logger names, connector logs included
    none of above - errors only
    """
    if verbose and debug:
        raise typer.BadParameter("Only one parameter `verbose` or `debug` is possible")

    config = ConsoleLoggingConfig()
    if debug:
        config.level = logging.DEBUG
        config.formatter = "detailed"
        config.loggers[CONNECTOR_LOGGER].handlers = ["console"]
    elif verbose:
        config.level = logging.INFO

    logging.config.dictConfig(config.to_dict_config())
