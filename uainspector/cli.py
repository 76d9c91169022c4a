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

"""Command-line interface for uainspector.

This module provides the ``uainspector`` entry point, a thin shell around the
version functions for checking how rule data and user agent fragments are
normalized and ordered.

Commands:

    sanitize: Remove rule template artifacts from a version
    canonicalize: Print the canonical form of a version
    semver: Print the semver projection of a version
    compare: Compare two versions
    major: Print the major version
    sort: Sort versions
    check: Check a version against a minimum version

Example:
    Canonical form with every pass shown:
        ```bash
        $ uainspector canonicalize 1.02-03alpha --trace
        ```

    Compare with the ordinal strategy:
        ```bash
        $ uainspector compare 1.0.0 1.0.0.4 --strategy ordinal
        1.0.0 < 1.0.0.4
        ```

    Rule constraint check:
        ```bash
        $ uainspector check 7.0.4 7.0
        ```

Exit Codes:

- 0: Success (or constraint satisfied for 'check')
- 1: Error (configuration failure) or constraint not satisfied

Note:
    Defaults for --strategy and --parts come from the settings file
    (see uainspector.config). Debug mode implies verbose mode.

"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path
import sys
from typing import Any

from uainspector import __version__
from uainspector.config import load_settings
from uainspector.exceptions import ConfigError, UAInspectorError
from uainspector.logging import get_global_logger, get_logger, set_global_logger
from uainspector.versioning import (
    STRATEGIES,
    at_least,
    canonicalize,
    get_comparator,
    major,
    parse_semver,
    sanitize,
    trace_canonicalize,
    version_key,
)


def _prepare(args: argparse.Namespace) -> dict[str, Any]:
    """Configure the global logger and load settings for a command."""
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)
    return load_settings(args.config)


def _input(raw: str, settings: dict[str, Any]) -> str:
    """Apply input sanitizing when enabled in settings."""
    if not settings["versioning"]["sanitize_input"]:
        return raw
    cleaned = sanitize(raw)
    if cleaned != raw:
        get_global_logger().verbose("INPUT", f"Sanitized {raw!r} -> {cleaned!r}")
    return cleaned


def _strategy(args: argparse.Namespace, settings: dict[str, Any]) -> str:
    return args.strategy or settings["versioning"]["strategy"]


def cmd_sanitize(args: argparse.Namespace) -> int:
    """Handler for 'uainspector sanitize' command."""
    _prepare(args)
    print(sanitize(args.version))
    return 0


def cmd_canonicalize(args: argparse.Namespace) -> int:
    """Handler for 'uainspector canonicalize' command.

    With --trace every pass result is printed, numbered, before the final
    canonical form. Without it, the passes are still logged in debug mode.

    Args:
        args: Parsed command-line arguments containing the version and flags.

    Returns:
        Exit code (always 0).
    """
    settings = _prepare(args)
    logger = get_global_logger()
    ver = _input(args.version, settings)

    steps = list(trace_canonicalize(ver))
    for index, (name, result) in enumerate(steps, start=1):
        if args.trace:
            print(f"[{index}/{len(steps)}] {name}: {result!r}")
        else:
            logger.debug("CANON", f"{name}: {result!r}")

    print(canonicalize(ver))
    return 0


def cmd_semver(args: argparse.Namespace) -> int:
    """Handler for 'uainspector semver' command.

    Prints the projection of the version; an empty version prints an empty
    line.
    """
    settings = _prepare(args)
    logger = get_global_logger()
    parts = args.parts or settings["versioning"]["semver_parts"]
    ver = _input(args.version, settings)

    triple = parse_semver(ver, parts)
    if triple is None:
        logger.verbose("SEMVER", "Empty version, nothing to project")
        print("")
        return 0

    logger.verbose(
        "SEMVER",
        f"major={triple.major} minor={triple.minor} patch={triple.patch} "
        f"pre={triple.pre!r} (parts={parts})",
    )
    print(triple)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'uainspector compare' command.

    Prints ``A <op> B`` where op is ``<``, ``=`` or ``>``.
    """
    settings = _prepare(args)
    strategy = _strategy(args, settings)
    a = _input(args.version_a, settings)
    b = _input(args.version_b, settings)

    get_global_logger().verbose("COMPARE", f"Strategy: {strategy}")
    result = get_comparator(strategy)(a, b)
    print(f"{a} {result.symbol} {b}")
    return 0


def cmd_major(args: argparse.Namespace) -> int:
    """Handler for 'uainspector major' command."""
    settings = _prepare(args)
    print(major(_input(args.version, settings)))
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'uainspector sort' command.

    Prints the versions one per line, oldest first (newest first with
    --reverse). Ties keep their input order.
    """
    settings = _prepare(args)
    strategy = _strategy(args, settings)
    versions = [_input(v, settings) for v in args.versions]

    get_global_logger().verbose(
        "SORT", f"Sorting {len(versions)} version(s) with strategy: {strategy}"
    )
    for ver in sorted(versions, key=version_key(strategy), reverse=args.reverse):
        print(ver)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Handler for 'uainspector check' command.

    Returns:
        Exit code (0 when the version is at least the minimum, 1 otherwise).
    """
    settings = _prepare(args)
    strategy = _strategy(args, settings)
    ver = _input(args.version, settings)
    minimum = _input(args.minimum, settings)

    if at_least(ver, minimum, strategy=strategy):
        print(f"[SUCCESS] {ver} satisfies >= {minimum} ({strategy})")
        return 0
    print(f"[FAILED] {ver} does not satisfy >= {minimum} ({strategy})")
    return 1


def _run(func: Callable[[argparse.Namespace], int], args: argparse.Namespace) -> int:
    """Run a command handler, turning library errors into exit code 1."""
    try:
        return func(args)
    except ConfigError as err:
        print(f"Configuration error: {err}")
        if args.verbose or args.debug:
            import traceback

            traceback.print_exc()
        return 1
    except UAInspectorError as err:
        # Catch any other errors we might have missed
        print(f"Error: {err}")
        if args.verbose or args.debug:
            import traceback

            traceback.print_exc()
        return 1


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: nearest uainspector.yaml, if any)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def _add_strategy_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=None,
        help="Comparison strategy (default: from settings, canonicalized)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="uainspector",
        description="Version canonicalization and ordering for user agent rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"uainspector {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'sanitize' command
    parser_sanitize = subparsers.add_parser(
        "sanitize",
        help="Remove rule template artifacts from a version",
        description="Strip $N placeholders, a trailing dot and underscores.",
    )
    parser_sanitize.add_argument("version", help="Version string")
    _add_common_arguments(parser_sanitize)
    parser_sanitize.set_defaults(func=cmd_sanitize)

    # 'canonicalize' command
    parser_canonicalize = subparsers.add_parser(
        "canonicalize",
        help="Print the canonical form of a version",
        description="Print the PHP version_compare compatible canonical form.",
    )
    parser_canonicalize.add_argument("version", help="Version string")
    parser_canonicalize.add_argument(
        "--trace",
        action="store_true",
        help="Print the result of every canonicalization pass",
    )
    _add_common_arguments(parser_canonicalize)
    parser_canonicalize.set_defaults(func=cmd_canonicalize)

    # 'semver' command
    parser_semver = subparsers.add_parser(
        "semver",
        help="Print the semver projection of a version",
        description="Project a raw version onto major.minor.patch[-pre].",
    )
    parser_semver.add_argument("version", help="Version string")
    parser_semver.add_argument(
        "--parts",
        type=int,
        choices=range(1, 5),
        default=None,
        help="Number of segments to split into; 4 keeps a pre-release tag "
        "(default: from settings, 3)",
    )
    _add_common_arguments(parser_semver)
    parser_semver.set_defaults(func=cmd_semver)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two versions",
        description="Print whether version A is less than, equal to or greater than B.",
    )
    parser_compare.add_argument("version_a", help="First version")
    parser_compare.add_argument("version_b", help="Second version")
    _add_strategy_argument(parser_compare)
    _add_common_arguments(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'major' command
    parser_major = subparsers.add_parser(
        "major",
        help="Print the major version",
        description="Print the leading numeric component, or 0.",
    )
    parser_major.add_argument("version", help="Version string")
    _add_common_arguments(parser_major)
    parser_major.set_defaults(func=cmd_major)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Sort versions",
        description="Print the given versions in ascending order.",
    )
    parser_sort.add_argument("versions", nargs="+", help="Version strings")
    parser_sort.add_argument(
        "--reverse",
        action="store_true",
        help="Sort in descending order",
    )
    _add_strategy_argument(parser_sort)
    _add_common_arguments(parser_sort)
    parser_sort.set_defaults(func=cmd_sort)

    # 'check' command
    parser_check = subparsers.add_parser(
        "check",
        help="Check a version against a minimum version",
        description="Exit with 0 when VERSION >= MINIMUM, 1 otherwise.",
    )
    parser_check.add_argument("version", help="Version extracted from a user agent")
    parser_check.add_argument("minimum", help="Minimum version declared by a rule")
    _add_strategy_argument(parser_check)
    _add_common_arguments(parser_check)
    parser_check.set_defaults(func=cmd_check)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the uainspector CLI.

    This function is registered as the 'uainspector' console script in
    pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    exit_code = _run(args.func, args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
