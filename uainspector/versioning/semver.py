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

"""Best-effort projection of raw version strings onto semver.

Versions found in user agents rarely follow semantic versioning. This module
maps them onto a bounded ``major.minor.patch[-pre]`` structure:

- Missing components are filled with zeroes.
- The first component that fails integer parsing, or is negative, becomes
  zero and so does every component after it.
- A fourth dot-separated segment, when requested, is kept verbatim as the
  pre-release tag.
- Empty strings are "no version" and project to ``""`` (or ``None`` for the
  structured form), which is distinct from an unparseable version.

Example:
    ```python
    from uainspector.versioning.semver import to_semver

    to_semver("15")            # "15.0.0"
    to_semver("3.help")        # "3.0.0"
    to_semver("1.2.3.4")       # "1.2.3"
    to_semver("1.2.3.4", 4)    # "1.2.3-4"
    to_semver("1.-2.3.4")      # "1.0.0"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
import re

_INT_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)

MAX_PARTS = 4


@dataclass(frozen=True)
class SemverTriple:
    """Numeric version core plus an optional free-form pre-release tag.

    Attributes:
        major: Major component (never negative).
        minor: Minor component (never negative).
        patch: Patch component (never negative).
        pre: Pre-release tag, or None when none was extracted.

    """

    major: int
    minor: int
    patch: int
    pre: str | None = None

    def __str__(self) -> str:
        core = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre is None:
            return core
        return f"{core}-{self.pre}"


def parse_int_prefix(text: str) -> int | None:
    """Parse the integer at the start of ``text``.

    An optional sign followed by ASCII digits is read; anything after the
    digits is ignored. Returns None when ``text`` does not start with an
    integer.

    >>> parse_int_prefix("3rc1")
    3
    >>> parse_int_prefix("-2")
    -2
    >>> parse_int_prefix("rc1") is None
    True
    """
    m = _INT_PREFIX.match(text)
    if not m:
        return None
    try:
        return int(m.group(0))
    except ValueError:
        # Digit run longer than the interpreter's int conversion limit
        return None


def parse_semver(version: str, parts: int = 3) -> SemverTriple | None:
    """Project a raw version string onto a ``SemverTriple``.

    Args:
        version: Raw (not canonicalized) version string.
        parts: Maximum number of dot-separated segments to split into. The
            last segment keeps any remaining dots. Values outside 1..4 are
            clamped; 4 enables the pre-release tag.

    Returns:
        The projected version, or None for an empty input.

    """
    if version == "":
        return None

    parts = min(max(parts, 1), MAX_PARTS)
    segments = version.split(".", parts - 1)

    numbers: list[int] = []
    failed = False
    for segment in segments[:3]:
        value = None if failed else parse_int_prefix(segment)
        if value is None or value < 0:
            failed = True
            value = 0
        numbers.append(value)
    numbers.extend([0] * (3 - len(numbers)))

    pre = segments[3] if len(segments) == MAX_PARTS else None
    return SemverTriple(numbers[0], numbers[1], numbers[2], pre)


def to_semver(version: str, parts: int = 3) -> str:
    """Convert an unknown version string to a semver-comparable format.

    Missing values are filled with zeroes while empty strings are ignored.
    See ``parse_semver`` for the meaning of ``parts``.

    Returns:
        ``"major.minor.patch"`` or ``"major.minor.patch-pre"``, or ``""``
        when ``version`` is empty.
    """
    triple = parse_semver(version, parts)
    if triple is None:
        return ""
    return str(triple)


def to_semver_with_pre(version: str) -> str:
    """Like ``to_semver(version, 4)`` but always carries a pre-release tag.

    A synthetic ``-0`` tag is appended when none was extracted, so that
    every result is ordered by the same four keys. An empty version yields
    ``"-0"``.
    """
    semver = to_semver(version, MAX_PARTS)
    if "-" in semver:
        return semver
    return semver + "-0"
