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

import json
import sys
from enum import Enum
from json import JSONEncoder
from typing import Any, Dict

from rich import box, get_console
from rich import print as rich_print
from rich.table import Table

MASKED_VALUE = "****"
SENSITIVE_KEYS = ("password", "passcode", "proxy_password")

# ensure we do not break DSNs that wrap lines
get_console().soft_wrap = True


class OutputFormat(str, Enum):
    TABLE = "TABLE"
    JSON = "JSON"


class CustomJSONEncoder(JSONEncoder):
    """Custom JSON encoder handling serialization of non-standard types"""

    def default(self, o):
        if isinstance(o, Enum):
            return o.value
        return super().default(o)


def mask_sensitive_parameters(parameters: Dict[str, Any]) -> Dict[str, Any]:
    return {
        k: MASKED_VALUE if k in SENSITIVE_KEYS and v else v
        for k, v in parameters.items()
    }


def print_message(message: str) -> None:
    print(message)


def print_object(obj: Dict[str, Any], output_format: OutputFormat) -> None:
    if output_format == OutputFormat.JSON:
        json.dump(obj, sys.stdout, cls=CustomJSONEncoder, indent=4)
        print(flush=True)
        return

    table = Table("key", "value", show_header=True, box=box.ASCII)
    for key, value in obj.items():
        if isinstance(value, dict):
            value = ", ".join(f"{k}={v}" for k, v in value.items())
        table.add_row(key, str(value))
    rich_print(table)
