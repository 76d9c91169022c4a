"""
Settings loading and merging for uainspector tooling.

Settings control how the command line tool applies the version functions
(which comparison strategy to use by default, how many semver parts to
project onto, whether inputs are sanitized first). The version functions
themselves take no configuration.

Settings Layers
---------------
1. **Built-in defaults** (``DEFAULT_SETTINGS``)
2. **Project file** (``uainspector.yaml``)
   - Found by walking upward from the working directory
   - Optional
3. **Explicit file** (``--config PATH``)
   - Must exist when given

Merge Behavior
--------------
Deep merge with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced
  - **Scalars**: Overwritten

Recognized Keys
---------------
.. code-block:: yaml

    versioning:
      strategy: canonicalized   # or "ordinal"
      semver_parts: 3           # 1..4
      sanitize_input: false

Error Handling
--------------
- ConfigError: missing explicit file, YAML parse errors, empty files,
  non-mapping top level, invalid values
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from pathlib import Path
    >>> from uainspector.config import load_settings
    >>> settings = load_settings(Path("uainspector.yaml"))
    >>> settings["versioning"]["strategy"]
    'ordinal'
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from uainspector.exceptions import ConfigError
from uainspector.logging import get_global_logger
from uainspector.versioning.compare import STRATEGIES
from uainspector.versioning.semver import MAX_PARTS

SETTINGS_FILENAME = "uainspector.yaml"

DEFAULT_SETTINGS: dict[str, Any] = {
    "versioning": {
        "strategy": "canonicalized",
        "semver_parts": 3,
        "sanitize_input": False,
    },
}

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      ConfigError - when the file does not exist, cannot be parsed, or is empty
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {p}")
    return data


def _print_yaml_content(data: dict[str, Any]) -> None:
    """Log YAML content line by line in debug mode."""
    logger = get_global_logger()
    yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False)
    for line in yaml_str.split("\n"):
        if line.strip():
            logger.debug("CONFIG", line)


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Project file discovery
# -------------------------------


def _find_project_file(start_dir: Path) -> Path | None:
    """
    Walk upward from 'start_dir' looking for a 'uainspector.yaml'.
    Returns its path or None if not found.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


# -------------------------------
# Validation
# -------------------------------


def _validate(settings: dict[str, Any]) -> None:
    """Check value types and ranges of the merged settings.

    Raises:
        ConfigError: On the first invalid value found.
    """
    versioning = settings.get("versioning")
    if not isinstance(versioning, dict):
        raise ConfigError("'versioning' must be a mapping")

    strategy = versioning.get("strategy")
    if strategy not in STRATEGIES:
        raise ConfigError(
            f"versioning.strategy must be one of {', '.join(STRATEGIES)}, "
            f"got {strategy!r}"
        )

    parts = versioning.get("semver_parts")
    # bool is an int subclass; reject it explicitly
    if isinstance(parts, bool) or not isinstance(parts, int):
        raise ConfigError(f"versioning.semver_parts must be an integer, got {parts!r}")
    if not 1 <= parts <= MAX_PARTS:
        raise ConfigError(
            f"versioning.semver_parts must be between 1 and {MAX_PARTS}, got {parts}"
        )

    if not isinstance(versioning.get("sanitize_input"), bool):
        raise ConfigError("versioning.sanitize_input must be true or false")

    unknown = sorted(set(versioning) - set(DEFAULT_SETTINGS["versioning"]))
    if unknown:
        get_global_logger().warning(
            "CONFIG", f"Ignoring unknown versioning keys: {', '.join(unknown)}"
        )


# -------------------------------
# Public API
# -------------------------------


def load_settings(
    path: Path | None = None,
    *,
    search_from: Path | None = None,
) -> dict[str, Any]:
    """Load and merge the effective settings.

    Args:
        path: Explicit settings file. Must exist when given.
        search_from: Directory to start the upward search for a project
            ``uainspector.yaml``. Defaults to the current working directory.

    Returns:
        The merged and validated settings mapping. Without any settings file
        this is a copy of ``DEFAULT_SETTINGS``.

    Raises:
        ConfigError: On missing explicit file, YAML errors or invalid values.
    """
    logger = get_global_logger()
    merged = copy.deepcopy(DEFAULT_SETTINGS)
    layers_merged = 1

    start_dir = (search_from or Path.cwd()).resolve()
    project_file = _find_project_file(start_dir)
    if project_file:
        logger.verbose("CONFIG", f"Loading: {project_file}")
        project_settings = _load_yaml_file(project_file)
        _print_yaml_content(project_settings)
        merged = _deep_merge_dicts(merged, project_settings)
        layers_merged += 1

    if path is not None:
        path = path.resolve()
        if path != project_file:
            logger.verbose("CONFIG", f"Loading: {path}")
            explicit_settings = _load_yaml_file(path)
            _print_yaml_content(explicit_settings)
            merged = _deep_merge_dicts(merged, explicit_settings)
            layers_merged += 1

    logger.verbose("CONFIG", f"Deep merging {layers_merged} layer(s)")
    _validate(merged)

    logger.debug("CONFIG", "--- Effective Settings ---")
    _print_yaml_content(merged)
    return merged
