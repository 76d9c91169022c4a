# Copyright 2025 The uainspector Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Exception hierarchy for uainspector.

The version functions themselves never raise: unparseable input degrades to
zero. Errors only come from the surrounding tooling (settings files, command
line), and all of them inherit from UAInspectorError so callers can catch
everything with a single except clause.

Example:
    Catching configuration errors:
        ```python
        from uainspector.config import load_settings
        from uainspector.exceptions import ConfigError

        try:
            settings = load_settings(Path("uainspector.yaml"))
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "UAInspectorError",
    "ConfigError",
]


class UAInspectorError(Exception):
    """Base exception for all uainspector errors."""

    pass


class ConfigError(UAInspectorError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - Missing settings files given explicitly
    - YAML parsing (syntax errors, empty files, non-mapping top level)
    - Invalid values (unknown comparison strategy, out of range semver parts)
    """

    pass
