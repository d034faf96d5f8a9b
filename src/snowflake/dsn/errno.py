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

# Validation errors
EMPTY_ACCOUNT = 260000
EMPTY_USERNAME = 260001
EMPTY_PASSWORD = 260002

# Structural errors
FAILED_TO_PARSE_PORT = 260004
INVALID_ESCAPE_SEQUENCE = 260005
INVALID_PARAMETER_VALUE = 260006
