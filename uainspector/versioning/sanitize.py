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

"""Cleanup of version strings produced by rule templates.

Rule templates such as ``"$1.$2"`` are filled with regex captures. When a
capture group did not participate in the match, the placeholder is left
behind together with its separator. This module strips those artifacts
before the version is canonicalized or compared.
"""

from __future__ import annotations

import re

_PLACEHOLDER = re.compile(r"\$\d", re.ASCII)
_TRAILING_DOT = re.compile(r"\.$")


def sanitize(version: str) -> str:
    """Remove template artifacts from a version string.

    Applied in order:

    1. Every ``$`` followed by a single digit is removed.
    2. One trailing ``.`` is removed.
    3. Every ``_`` becomes ``.``.
    4. Surrounding whitespace is trimmed.

    Args:
        version: Raw version string, possibly empty.

    Returns:
        The sanitized version string. Empty input yields empty output.

    Example:
        ```python
        sanitize("7.$2")    # "7"
        sanitize("10_3")    # "10.3"
        sanitize(" 4.1. ")  # "4.1."  (the dot is not trailing before trimming)
        ```
    """
    if version == "":
        return ""

    version = _PLACEHOLDER.sub("", version)
    version = _TRAILING_DOT.sub("", version, count=1)
    version = version.replace("_", ".")
    return version.strip()
