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

"""Canonical form of version strings.

The canonical form matches the normalization done by PHP's
``version_compare`` so that comparisons agree with upstream rule data:
separators become dots, letter/digit/punctuation boundaries are split into
dot-delimited tokens, and numeric tokens lose redundant leading zeros.

The normalization is a fixed sequence of whole-string substitution passes.
The order of the passes matters; each one is kept as a separate named step
so it can be inspected (see ``trace_canonicalize``) and tested on its own.

Example:
    ```python
    from uainspector.versioning.canonical import canonicalize, major

    canonicalize("1.02-03alpha04-05+00")  # "1.2.3.alpha.4.5.0"
    canonicalize("1|2/3#4")               # "1.|.2./.3.#.4"
    major("5.2")                          # 5
    ```

Note:
    All character classes are ASCII-only. Non-ASCII characters are treated
    as punctuation.
"""

from __future__ import annotations

from collections.abc import Iterator
import re
from typing import NamedTuple

from uainspector.versioning.semver import parse_int_prefix


class CanonicalizationPass(NamedTuple):
    """A single substitution step of the canonicalization pipeline."""

    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, version: str) -> str:
        return self.pattern.sub(self.replacement, version)


CANONICALIZATION_PASSES: tuple[CanonicalizationPass, ...] = (
    CanonicalizationPass("separators", re.compile(r"[-_+]"), "."),
    CanonicalizationPass(
        "split_alpha_digit", re.compile(r"([^\d.])(\d)", re.ASCII), r"\1.\2"
    ),
    CanonicalizationPass(
        "split_digit_alpha", re.compile(r"(\d)([^\d.])", re.ASCII), r"\1.\2"
    ),
    CanonicalizationPass(
        "split_alnum_punct", re.compile(r"([A-Za-z0-9])([^A-Za-z0-9])"), r"\1.\2"
    ),
    CanonicalizationPass(
        "split_punct_alnum", re.compile(r"([^A-Za-z0-9])([A-Za-z0-9])"), r"\1.\2"
    ),
    # The anchoring dot is consumed with the zeros; the split passes leave a
    # spare dot in front of every digit that follows another character.
    CanonicalizationPass("collapse_zero_run", re.compile(r"(?:^|\.)0+"), "0"),
    CanonicalizationPass(
        "strip_leading_zero", re.compile(r"(?:^|\.)0(\d+)", re.ASCII), r"\1"
    ),
    CanonicalizationPass("collapse_dots", re.compile(r"\.\.+"), "."),
)


def trace_canonicalize(version: str) -> Iterator[tuple[str, str]]:
    """Yield ``(pass_name, result)`` after each canonicalization pass.

    The last yielded result equals ``canonicalize(version)``.
    """
    for step in CANONICALIZATION_PASSES:
        version = step.apply(version)
        yield step.name, version


def canonicalize(version: str) -> str:
    """Canonicalize a version for comparison.

    Args:
        version: Arbitrary version string, possibly empty.

    Returns:
        Dot-delimited token string. Applying it again is a no-op.

    Example:
        ```python
        canonicalize("1.0alpha")  # "1.0.alpha"
        canonicalize("1...2")     # "1.2"
        canonicalize("0001.02")   # "1.2"
        canonicalize("1.00.2")    # "1.0.2"
        ```
    """
    for step in CANONICALIZATION_PASSES:
        version = step.apply(version)
    return version


def major(version: str) -> int:
    """Extract the major version from a version string.

    Returns the leading canonical token as an integer when it is strictly
    positive; negative, zero and unparseable values all give 0.

    Example:
        ```python
        major("1.0.0")    # 1
        major("invalid")  # 0
        major("-1.2.3")   # 0
        ```
    """
    first = canonicalize(version).split(".", 1)[0]
    value = parse_int_prefix(first)
    if value is not None and value > 0:
        return value
    return 0
