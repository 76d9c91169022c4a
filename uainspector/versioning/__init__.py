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

"""Version canonicalization and ordering for user agent rules.

Version fragments extracted from user agents (browser builds, OS versions,
short code mapped values) are normalized and ordered here so that
version-range rules evaluate deterministically. Every function is pure and
total: any string, including the empty string, gives a result.

Modules:
    sanitize
        Removal of leftover rule template placeholders and separators.
    canonical
        PHP ``version_compare`` compatible canonical form, major version.
    semver
        Best-effort projection onto ``major.minor.patch[-pre]``.
    compare
        Ordinal and canonicalized comparison strategies.

Example:
    Evaluating a rule constraint:
        ```python
        from uainspector.versioning import Ordering, compare_canonicalized

        compare_canonicalized("7.0.4", "7.0") >= Ordering.EQUAL  # True
        ```

    Sorting:
        ```python
        from uainspector.versioning import version_key

        sorted(["1rc", "1", "1beta"], key=version_key())
        # ["1beta", "1rc", "1"]
        ```
"""

from .canonical import (
    CANONICALIZATION_PASSES,
    canonicalize,
    major,
    trace_canonicalize,
)
from .compare import (
    STRATEGIES,
    Ordering,
    PriorityClass,
    Strategy,
    at_least,
    classify,
    compare,
    compare_canonicalized,
    get_comparator,
    version_key,
)
from .sanitize import sanitize
from .semver import SemverTriple, parse_semver, to_semver, to_semver_with_pre

__all__ = [
    "CANONICALIZATION_PASSES",
    "STRATEGIES",
    "Ordering",
    "PriorityClass",
    "SemverTriple",
    "Strategy",
    "at_least",
    "canonicalize",
    "classify",
    "compare",
    "compare_canonicalized",
    "get_comparator",
    "major",
    "parse_semver",
    "sanitize",
    "to_semver",
    "to_semver_with_pre",
    "trace_canonicalize",
    "version_key",
]
