"""
uainspector - version canonicalization and ordering

The versioning core of a user agent inspection library. Version fragments
found in user agents (browser builds, OS versions, short code mapped
values) are sanitized, canonicalized and ordered so that version-range rules
such as "OS version at least 7.0" evaluate deterministically.

The canonical form and the canonicalized comparison replicate PHP's
``version_compare``, which the upstream rule data is written against.

uainspector provides:
  - Removal of rule template artifacts ($1 placeholders, trailing dots)
  - PHP compatible canonical form of version strings
  - Best-effort projection onto major.minor.patch[-pre]
  - Ordinal and canonicalized comparison strategies
  - A command line tool for inspecting all of the above

Quick Start
-----------
    >>> from uainspector import compare_canonicalized, canonicalize
    >>> canonicalize("1.02-03alpha")
    '1.2.3.alpha'
    >>> compare_canonicalized("1.0rc1", "1.0") < 0
    True

From the shell:

    $ uainspector compare 1beta 1rc
    1beta < 1rc

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
config : package
    YAML settings loading and merging.
versioning : package
    Sanitizer, canonicalizer, semver bridge and comparators.
exceptions : module
    Exception hierarchy for the tooling layer.
logging : module
    Logger protocol used by the tooling layer.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Version canonicalization and ordering for user agent rules"

# Re-export commonly used functions for convenience
from uainspector.versioning import (
    Ordering,
    PriorityClass,
    SemverTriple,
    at_least,
    canonicalize,
    compare,
    compare_canonicalized,
    major,
    sanitize,
    to_semver,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "Ordering",
    "PriorityClass",
    "SemverTriple",
    "at_least",
    "canonicalize",
    "compare",
    "compare_canonicalized",
    "major",
    "sanitize",
    "to_semver",
]
