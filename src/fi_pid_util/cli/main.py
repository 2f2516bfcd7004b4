"""Main CLI entry point for fi_pid_util.

This module provides the main Click command group for the fi-pid-util CLI.
"""

from pathlib import Path
from typing import Optional

import click

from fi_pid_util import __version__
from fi_pid_util.cli.pid_commands import generate_command, verify_command
from fi_pid_util.config import load_config
from fi_pid_util.logging_audit import configure_logging
from fi_pid_util.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="fi-pid-util")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-pii",
    is_flag=True,
    help="Redact PIDs from logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_pii: bool,
) -> None:
    """Finnish PID Utility - verify and generate Finnish personal identity codes.

    Common usage:

        # Verify a PID
        fi-pid-util verify 010101-123N

        # Generate ten test PIDs
        fi-pid-util generate --test

        # Use custom configuration file
        fi-pid-util --config custom/config.json generate

        # Enable verbose logging for debugging
        fi-pid-util --verbose verify 010101-123N

    Use --help with any command for more information.
    """
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
        ctx.obj["config"] = config_obj
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj["verbose"] = verbose
    ctx.obj["redact_pii"] = redact_pii
    ctx.obj["log_file"] = log_file

    # Precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_pii_setting = redact_pii if redact_pii else config_obj.logging.redact_pii

    configure_logging(
        level=log_level, log_file=log_file_path, redact_pii=redact_pii_setting
    )


cli.add_command(verify_command)
cli.add_command(generate_command)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a configuration file.

    Example:
        fi-pid-util config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)
    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)

    click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
    click.echo(f"\nConfiguration file: {config_file}")

    click.echo("\nGenerator:")
    click.echo(f"  Years:       {config_obj.generator.min_year}-{config_obj.generator.max_year}")
    click.echo(f"  Validity:    {config_obj.generator.validity}")
    click.echo(f"  Count:       {config_obj.generator.count}")

    click.echo("\nLogging:")
    click.echo(f"  Level:       {config_obj.logging.level}")
    click.echo(f"  Log file:    {config_obj.logging.log_file}")
    click.echo(f"  Redact PII:  {config_obj.logging.redact_pii}")


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"fi-pid-util version {__version__}")


if __name__ == "__main__":
    cli()
