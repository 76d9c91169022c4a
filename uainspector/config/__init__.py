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

"""Settings loading for uainspector tooling.

Settings are layered: built-in defaults, then a project ``uainspector.yaml``
found by walking upward from the working directory, then an explicit file.

Public API:

- load_settings: Load and merge the effective settings

Example:
    Basic usage:

        from pathlib import Path
        from uainspector.config import load_settings

        settings = load_settings(Path("uainspector.yaml"))
        print(settings["versioning"]["strategy"])  # "canonicalized"

"""

from .loader import DEFAULT_SETTINGS, SETTINGS_FILENAME, load_settings

__all__ = ["DEFAULT_SETTINGS", "SETTINGS_FILENAME", "load_settings"]
