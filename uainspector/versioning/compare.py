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

"""Version ordering used by version-range rules.

Two independent strategies are provided. They differ in how missing
components and pre-release tags rank, and are deliberately not unified.

ordinal
    Both versions are projected onto ``major.minor.patch-pre`` (see
    ``semver.parse_semver``) with a synthetic ``"0"`` tag when none is
    present. Numeric components compare as integers, tags compare as plain
    strings.

canonicalized
    Both versions are canonicalized (see ``canonical.canonicalize``) and
    compared token by token the way PHP's ``version_compare`` does, using
    the ``PriorityClass`` table for non-numeric tokens:

        dev < alpha < beta < rc < numeric < patch

    Tokens outside the table (``"."``, ``"x"``, ``""``...) rank below
    ``dev``.

Both return an ``Ordering``, an ``IntEnum`` whose values are -1, 0 and 1.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
import functools
import re
from typing import Any, Literal

from uainspector.versioning.canonical import canonicalize
from uainspector.versioning.semver import MAX_PARTS, parse_semver

Strategy = Literal["ordinal", "canonicalized"]

STRATEGIES: tuple[str, ...] = ("ordinal", "canonicalized")

_DIGITS = re.compile(r"\d+", re.ASCII)


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @property
    def symbol(self) -> str:
        return {-1: "<", 0: "=", 1: ">"}[self.value]

    @classmethod
    def of(cls, a: Any, b: Any) -> Ordering:
        return cls((a > b) - (a < b))


class PriorityClass(IntEnum):
    """Rank of a canonical token in the canonicalized strategy."""

    OTHER = -1
    DEV = 0
    ALPHA = 1
    BETA = 2
    RC = 3
    NUMERIC = 4
    PATCH = 5


# Checked in order; "dev" must win over any shorter prefix.
_PREFIX_CLASSES: tuple[tuple[str, PriorityClass], ...] = (
    ("dev", PriorityClass.DEV),
    ("a", PriorityClass.ALPHA),
    ("b", PriorityClass.BETA),
    ("rc", PriorityClass.RC),
)


def classify(token: str) -> PriorityClass:
    """Return the priority class of a canonical token.

    Prefixes are matched case-sensitively: ``"alpha"`` and ``"a1"`` are
    ALPHA, ``"pl"`` and ``"patch"`` are PATCH, ``"RC"`` is OTHER.
    """
    for prefix, klass in _PREFIX_CLASSES:
        if token.startswith(prefix):
            return klass
    if token and token[0] in "0123456789":
        return PriorityClass.NUMERIC
    if token.startswith("p"):
        return PriorityClass.PATCH
    return PriorityClass.OTHER


# ----------------------------
# Ordinal strategy
# ----------------------------


def _ordinal_key(version: str) -> tuple[int, int, int, str]:
    triple = parse_semver(version, MAX_PARTS)
    if triple is None:
        return (0, 0, 0, "0")
    pre = "0" if triple.pre is None else triple.pre
    return (triple.major, triple.minor, triple.patch, pre)


def compare(version1: str, version2: str) -> Ordering:
    """Compare two versions through their semver projection.

    Examples:
        ```python
        compare("1.0.0", "1.0.1")      # Ordering.LESS
        compare("1.0.0", "1.0.0.4")    # Ordering.LESS ("0" < "4")
        compare("1.2.3", "1.02.03")    # Ordering.EQUAL
        compare("1.2.3", "1.020.3")    # Ordering.LESS
        ```
    """
    return Ordering.of(_ordinal_key(version1), _ordinal_key(version2))


# ----------------------------
# Canonicalized strategy
# ----------------------------


def _compare_numeric(token1: str, token2: str) -> Ordering:
    """Compare two digit runs by value without converting them to int."""
    digits1 = token1.lstrip("0") or "0"
    digits2 = token2.lstrip("0") or "0"
    return Ordering.of((len(digits1), digits1), (len(digits2), digits2))


def _compare_tokens(tokens1: list[str], tokens2: list[str]) -> Ordering:
    for i in range(max(len(tokens1), len(tokens2))):
        if i >= len(tokens1):
            # Missing component on the left
            if classify(tokens2[i]) >= PriorityClass.NUMERIC:
                return Ordering.LESS
            return Ordering.GREATER
        if i >= len(tokens2):
            if classify(tokens1[i]) < PriorityClass.NUMERIC:
                return Ordering.LESS
            return Ordering.GREATER

        token1, token2 = tokens1[i], tokens2[i]
        if _DIGITS.fullmatch(token1) and _DIGITS.fullmatch(token2):
            result = _compare_numeric(token1, token2)
        else:
            result = Ordering.of(classify(token1), classify(token2))
        if result is not Ordering.EQUAL:
            return result
    return Ordering.EQUAL


def compare_canonicalized(version1: str, version2: str) -> Ordering:
    """Compare two versions using their canonical form.

    Examples:
        ```python
        compare_canonicalized("1dev", "1alpha")  # Ordering.LESS
        compare_canonicalized("1rc", "1")        # Ordering.LESS
        compare_canonicalized("1", "1patch")     # Ordering.LESS
        compare_canonicalized("1", "1.0")        # Ordering.LESS
        compare_canonicalized(".", "1")          # Ordering.LESS
        compare_canonicalized("", "")            # Ordering.EQUAL
        ```

    Note:
        Tokens of the same non-numeric class are not compared by their
        text: ``"1alpha"`` and ``"1a"`` are equal.
    """
    tokens1 = canonicalize(version1).split(".")
    tokens2 = canonicalize(version2).split(".")
    return _compare_tokens(tokens1, tokens2)


# ----------------------------
# Convenience helpers
# ----------------------------

_COMPARATORS: dict[str, Callable[[str, str], Ordering]] = {
    "ordinal": compare,
    "canonicalized": compare_canonicalized,
}


def get_comparator(strategy: str) -> Callable[[str, str], Ordering]:
    """Return the comparison function registered under ``strategy``.

    Raises:
        ValueError: If the strategy name is unknown.
    """
    try:
        return _COMPARATORS[strategy]
    except KeyError:
        available = ", ".join(STRATEGIES)
        raise ValueError(
            f"Unknown comparison strategy {strategy!r}. Available: {available}"
        ) from None


def at_least(
    version: str,
    minimum: str,
    *,
    strategy: Strategy = "canonicalized",
) -> bool:
    """Decide whether ``version`` satisfies a "minimum version" constraint.

    Args:
        version: Version extracted from the user agent.
        minimum: Version declared by the rule.
        strategy: Comparison strategy name.

    Returns:
        True iff ``version >= minimum`` under the chosen strategy.

    Example:
        ```python
        at_least("7.0.4", "7.0")  # True
        at_least("7.0", "7.0.4")  # False
        ```
    """
    return get_comparator(strategy)(version, minimum) >= Ordering.EQUAL


def version_key(strategy: Strategy = "canonicalized") -> Callable[[str], Any]:
    """Return a ``sorted()`` key ordering version strings by ``strategy``.

    Example:
        ```python
        sorted(["1.0", "1.0rc1", "1.0beta"], key=version_key())
        # ["1.0beta", "1.0rc1", "1.0"]
        ```
    """
    return functools.cmp_to_key(get_comparator(strategy))
