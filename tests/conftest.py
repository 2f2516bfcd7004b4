"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import logging
import random
from pathlib import Path
from typing import Generator

import pytest

from fi_pid_util.config.manager import ENV_OVERRIDES, ENV_PREFIX


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.

    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def src_dir(project_root: Path) -> Path:
    """
    Return the src directory path.

    Args:
        project_root: Project root directory fixture.

    Returns:
        Path: Absolute path to the src directory.
    """
    return project_root / "src"


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """
    Run every test in an empty working directory without FI_PID_* overrides.

    Keeps log files and .env lookups out of the project tree and restores
    the root logger handlers afterwards.

    Yields:
        Path: The temporary working directory.
    """
    for suffix, _, _, _ in ENV_OVERRIDES:
        monkeypatch.delenv(f"{ENV_PREFIX}{suffix}", raising=False)
    monkeypatch.chdir(tmp_path)

    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level

    yield tmp_path

    for handler in list(root_logger.handlers):
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)


@pytest.fixture
def rng() -> random.Random:
    """
    Return a seeded random source for reproducible generation tests.

    Returns:
        random.Random: Random instance seeded with 42.
    """
    return random.Random(42)


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Create a temporary configuration file for testing.

    Args:
        tmp_path: Pytest's temporary directory fixture.

    Yields:
        Path: Path to the temporary configuration file.
    """
    config_file = tmp_path / "test_config.json"
    config_file.write_text(
        '{"generator": {"min_year": 1990, "max_year": 1999, "validity": "test", "count": 3}}'
    )
    yield config_file
