"""
Pytest configuration and shared fixtures for uainspector tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from uainspector.logging import get_global_logger, set_global_logger


@pytest.fixture(autouse=True)
def restore_global_logger():
    """Restore the global logger after each test (the CLI replaces it)."""
    previous = get_global_logger()
    yield
    set_global_logger(previous)


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_settings() -> dict[str, Any]:
    """Provide a complete settings mapping that overrides every default."""
    return {
        "versioning": {
            "strategy": "ordinal",
            "semver_parts": 4,
            "sanitize_input": True,
        },
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("uainspector.yaml", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
