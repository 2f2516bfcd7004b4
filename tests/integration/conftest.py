"""Integration test fixtures and configuration.

This module provides fixtures for integration tests, including:
- A Click test runner
- A temporary log file that the CLI writes to
"""

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click test runner."""
    return CliRunner()


@pytest.fixture
def cli_log_file(isolated_environment: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Route CLI logs to a temporary file and keep the console quiet.

    Returns:
        Path: Log file the CLI writes to.
    """
    log_file = isolated_environment / "logs" / "integration.log"
    monkeypatch.setenv("FI_PID_LOG_FILE", str(log_file))
    monkeypatch.setenv("FI_PID_LOG_LEVEL", "CRITICAL")
    return log_file
