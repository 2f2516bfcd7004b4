"""Unit tests for CLI commands.

This module tests the command-line interface for fi-pid-util including
the main group, PID verification and generation, and configuration commands.
"""

import json
import random
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from fi_pid_util.cli.main import cli
from fi_pid_util.cli.pid_commands import _generate_batch
from fi_pid_util.models.pid import GeneratorConfig
from fi_pid_util.pid.verifier import verify
from fi_pid_util.utils.exceptions import GenerationError


@pytest.fixture
def quiet_console(isolated_environment: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep log records off the console and write them to a temp log file."""
    log_file = isolated_environment / "cli.log"
    monkeypatch.setenv("FI_PID_LOG_LEVEL", "CRITICAL")
    monkeypatch.setenv("FI_PID_LOG_FILE", str(log_file))
    return log_file


class TestMainCLI:
    """Test cases for main CLI entry point."""

    def test_cli_help(self):
        """Test main CLI help output."""
        # Arrange
        runner = CliRunner()

        # Act
        result = runner.invoke(cli, ["--help"])

        # Assert
        assert result.exit_code == 0
        assert "Finnish PID Utility" in result.output
        assert "--verbose" in result.output
        assert "--version" in result.output
        assert "verify" in result.output
        assert "generate" in result.output

    def test_cli_version(self):
        """Test --version option displays version."""
        runner = CliRunner()

        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "fi-pid-util" in result.output
        assert "version" in result.output.lower()

    def test_cli_version_command(self, quiet_console):
        """Test explicit version command."""
        runner = CliRunner()

        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert "fi-pid-util version 0.1.0" in result.output

    def test_verbose_flag_configures_logging(self):
        """Test --verbose flag enables DEBUG logging."""
        # Arrange
        runner = CliRunner()

        # Act
        with patch("fi_pid_util.cli.main.configure_logging") as mock_config:
            result = runner.invoke(cli, ["--verbose", "verify", "--help"])

        # Assert
        assert result.exit_code == 0
        mock_config.assert_called_once()
        assert mock_config.call_args[1]["level"] == "DEBUG"

    def test_no_verbose_flag_uses_config_level(self):
        """Test without --verbose flag the configured level is used."""
        runner = CliRunner()

        with patch("fi_pid_util.cli.main.configure_logging") as mock_config:
            result = runner.invoke(cli, ["verify", "--help"])

        assert result.exit_code == 0
        assert mock_config.call_args[1]["level"] == "INFO"
        assert mock_config.call_args[1]["redact_pii"] is False

    def test_cli_flags_override_logging_config(self, tmp_path):
        """Test --log-file and --redact-pii are passed to logging setup."""
        runner = CliRunner()
        log_file = tmp_path / "custom.log"

        with patch("fi_pid_util.cli.main.configure_logging") as mock_config:
            result = runner.invoke(
                cli, ["--log-file", str(log_file), "--redact-pii", "verify", "--help"]
            )

        assert result.exit_code == 0
        assert mock_config.call_args[1]["log_file"] == log_file
        assert mock_config.call_args[1]["redact_pii"] is True

    def test_invalid_config_file_exits(self, tmp_path):
        """Test a broken config file stops the CLI with exit code 1."""
        runner = CliRunner()
        config_file = tmp_path / "bad.json"
        config_file.write_text("{not json")

        result = runner.invoke(cli, ["--config", str(config_file), "version"])

        assert result.exit_code == 1
        assert "Error loading configuration" in result.output


class TestVerifyCommand:
    """Test cases for the verify command."""

    def test_verify_valid_pid(self, quiet_console):
        """Test a valid PID is described and exits 0."""
        # Arrange
        runner = CliRunner()

        # Act
        result = runner.invoke(cli, ["verify", "050301-679T"])

        # Assert
        assert result.exit_code == 0
        assert "Valid PID: 050301-679T, born: 5.3.1901, gender: Male" in result.output

    def test_verify_test_pid_exits_zero(self, quiet_console):
        """Test a test PID is reported and does not fail the command."""
        runner = CliRunner()

        result = runner.invoke(cli, ["verify", "260503-998S"])

        assert result.exit_code == 0
        assert "Test PID: 260503-998S" in result.output

    def test_verify_invalid_pid_exits_one(self, quiet_console):
        """Test any invalid PID makes the command exit 1."""
        runner = CliRunner()

        result = runner.invoke(cli, ["verify", "010101-123N", "naurispelto"])

        assert result.exit_code == 1
        assert "Valid PID: 010101-123N" in result.output
        assert "Invalid PID: naurispelto" in result.output

    def test_verify_pid_starting_with_dash(self, quiet_console):
        """Test a PID starting with a dash is verified, not parsed as an option."""
        # Arrange
        runner = CliRunner()

        # Act
        result = runner.invoke(cli, ["verify", "-050301-179"])

        # Assert
        assert result.exit_code == 1
        assert "Invalid PID: -050301-179" in result.output

    def test_verify_after_double_dash(self, quiet_console):
        """Test option-like strings after -- are verified as PIDs."""
        runner = CliRunner()

        result = runner.invoke(cli, ["verify", "--", "--json"])

        assert result.exit_code == 1
        assert "Invalid PID: --json" in result.output

    def test_verify_requires_argument(self, quiet_console):
        """Test verify without PIDs is a usage error."""
        runner = CliRunner()

        result = runner.invoke(cli, ["verify"])

        assert result.exit_code == 2

    def test_verify_json_output(self, quiet_console):
        """Test --json prints a parseable list of results."""
        runner = CliRunner()

        result = runner.invoke(cli, ["verify", "--json", "211123A965F", "131052-308T"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["pid"] for item in data] == ["211123A965F", "131052-308T"]
        assert data[0]["birth_date"] == "2023-11-21"
        assert data[1]["gender"] == "female"

    def test_verify_sort(self, quiet_console):
        """Test --sort orders valid PIDs by birth date."""
        runner = CliRunner()

        result = runner.invoke(
            cli, ["verify", "--json", "--sort", "131052-308T", "210911+0785", "010101-123N"]
        )

        assert result.exit_code == 0
        assert [item["pid"] for item in json.loads(result.output)] == [
            "210911+0785",
            "010101-123N",
            "131052-308T",
        ]

    def test_verify_writes_audit_log(self, quiet_console):
        """Test verification is recorded in the audit log."""
        runner = CliRunner()

        runner.invoke(cli, ["verify", "010101-123N", "12345678901"])

        content = quiet_console.read_text()
        assert "AUDIT [PIDS_VERIFIED]" in content
        assert "status=failure" in content
        assert "invalid_count=1" in content


class TestGenerateCommand:
    """Test cases for the generate command."""

    def test_generate_default_count(self, quiet_console):
        """Test ten valid PIDs are printed by default."""
        # Arrange
        runner = CliRunner()

        # Act
        result = runner.invoke(cli, ["generate"])

        # Assert
        assert result.exit_code == 0
        pids = result.output.split()
        assert len(pids) == 10
        assert all(verify(pid).is_valid for pid in pids)

    def test_generate_test_pids(self, quiet_console):
        """Test --test with a year range produces test PIDs in range."""
        runner = CliRunner()

        result = runner.invoke(
            cli, ["generate", "--count", "5", "--test", "--min-year", "1800", "--max-year", "1899"]
        )

        assert result.exit_code == 0
        results = [verify(pid) for pid in result.output.split()]
        assert len(results) == 5
        assert all(r.validity.value == "test" for r in results)
        assert all(1800 <= r.year <= 1899 for r in results)

    def test_generate_seed_reproducible(self, quiet_console):
        """Test the same --seed prints the same PIDs."""
        runner = CliRunner()

        first = runner.invoke(cli, ["generate", "--seed", "42", "--count", "3"])
        second = runner.invoke(cli, ["generate", "--seed", "42", "--count", "3"])

        assert first.exit_code == 0
        assert first.output == second.output

    def test_generate_uses_config_file(self, quiet_console, temp_config_file):
        """Test defaults come from the config file."""
        runner = CliRunner()

        result = runner.invoke(cli, ["--config", str(temp_config_file), "generate"])

        assert result.exit_code == 0
        results = [verify(pid) for pid in result.output.split()]
        assert len(results) == 3
        assert all(1990 <= r.year <= 1999 for r in results)

    def test_generate_real_overrides_config(self, quiet_console, temp_config_file):
        """Test --real overrides a test validity from the config file."""
        runner = CliRunner()

        result = runner.invoke(cli, ["--config", str(temp_config_file), "generate", "--real"])

        assert result.exit_code == 0
        assert all(verify(pid).validity.value == "valid" for pid in result.output.split())

    @pytest.mark.parametrize(
        "args",
        [
            ["--min-year", "1700"],
            ["--max-year", "2100"],
            ["--min-year", "2000", "--max-year", "1990"],
        ],
    )
    def test_generate_invalid_years(self, quiet_console, args):
        """Test unsupported year options exit 1 with an error."""
        runner = CliRunner()

        result = runner.invoke(cli, ["generate", *args])

        assert result.exit_code == 1
        assert "Invalid generation options" in result.output

    def test_generate_zero_count_rejected(self, quiet_console):
        """Test --count below one is a usage error."""
        runner = CliRunner()

        result = runner.invoke(cli, ["generate", "--count", "0"])

        assert result.exit_code == 2

    def test_generate_writes_audit_log(self, quiet_console):
        """Test generation is recorded in the audit log."""
        runner = CliRunner()

        runner.invoke(cli, ["generate", "--count", "2"])

        content = quiet_console.read_text()
        assert "AUDIT [PIDS_GENERATED]" in content
        assert "count=2" in content


class TestGenerateBatch:
    """Test cases for strict batch generation."""

    def test_full_batch(self):
        pids = _generate_batch(GeneratorConfig(), 4, random.Random(1), strict=True)

        assert len(pids) == 4

    def test_short_batch_strict_raises(self):
        """Test a short batch raises GenerationError in strict mode."""
        config = GeneratorConfig(min_year=1700, max_year=1799)

        with pytest.raises(GenerationError, match="Generated 0 of 3"):
            _generate_batch(config, 3, None, strict=True)

    def test_short_batch_lenient(self):
        """Test a short batch is returned as is without strict mode."""
        config = GeneratorConfig(min_year=1700, max_year=1799)

        assert _generate_batch(config, 3, None, strict=False) == []


class TestConfigCommands:
    """Test cases for the config command group."""

    def test_config_validate_valid(self, quiet_console, temp_config_file):
        """Test a valid config file is summarized."""
        runner = CliRunner()

        result = runner.invoke(cli, ["config", "validate", str(temp_config_file)])

        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "1990-1999" in result.output
        assert "test" in result.output

    def test_config_validate_invalid(self, quiet_console, tmp_path):
        """Test an invalid config file exits 1."""
        runner = CliRunner()
        config_file = tmp_path / "invalid.json"
        config_file.write_text(json.dumps({"generator": {"validity": "invalid"}}))

        result = runner.invoke(cli, ["config", "validate", str(config_file)])

        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output

    def test_config_validate_missing_file(self, quiet_console, tmp_path):
        """Test a missing file is a usage error."""
        runner = CliRunner()

        result = runner.invoke(cli, ["config", "validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 2
