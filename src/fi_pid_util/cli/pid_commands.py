"""PID verification and generation CLI commands for fi_pid_util.

This module provides the ``verify`` and ``generate`` commands. Both are thin
wrappers around ``fi_pid_util.pid``; output text comes from
``fi_pid_util.pid.report``.
"""

import json as json_lib
import logging
import random
import sys
import time
from typing import Optional

import click
from pydantic import ValidationError

from fi_pid_util.config import Config, GeneratorSettings, load_config
from fi_pid_util.logging_audit import log_audit_event
from fi_pid_util.models.pid import GeneratorConfig, Validity
from fi_pid_util.pid import describe, generate_many, result_to_dict, sort_results, verify
from fi_pid_util.utils.exceptions import GenerationError

logger = logging.getLogger(__name__)

VALIDITY_COLORS = {
    Validity.VALID: "green",
    Validity.TEST: "yellow",
    Validity.INVALID: "red",
}


def _get_config(ctx: click.Context) -> Config:
    """Return the config loaded by the main group, or load the defaults."""
    config = (ctx.obj or {}).get("config")
    return config if config is not None else load_config()


def _silence_console_logging() -> None:
    """Keep log records off the console so JSON output stays parseable."""
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler) and not hasattr(handler, "baseFilename"):
            handler.setLevel(logging.CRITICAL + 1)


@click.command("verify", context_settings={"ignore_unknown_options": True})
@click.argument("pids", nargs=-1, required=True)
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.option(
    "--sort",
    "sort_output",
    is_flag=True,
    help="Order valid PIDs by birth date; test and invalid PIDs are listed last",
)
def verify_command(pids: tuple[str, ...], json_output: bool, sort_output: bool) -> None:
    """Verify one or more Finnish PIDs.

    Prints validity, birth date and gender for every PID. Exits with code 0
    when every PID is valid or a test PID, code 1 otherwise.

    Examples:

        # Verify a single PID
        fi-pid-util verify 010101-123N

        # Verify several PIDs, sorted by birth date
        fi-pid-util verify 131052-308T 010101-123N --sort

        # Machine readable output
        fi-pid-util verify 211123A965F --json

        # Strings starting with a dash are verified as PIDs too;
        # use -- to pass one that looks like an option
        fi-pid-util verify -- --json
    """
    if json_output:
        _silence_console_logging()

    start = time.time()
    results = [verify(pid) for pid in pids]
    if sort_output:
        results = sort_results(results)

    if json_output:
        click.echo(json_lib.dumps([result_to_dict(result) for result in results], indent=2))
    else:
        for result in results:
            click.secho(describe(result), fg=VALIDITY_COLORS[result.validity])

    invalid_count = sum(1 for result in results if result.validity is Validity.INVALID)
    log_audit_event(
        "PIDS_VERIFIED",
        {
            "status": "failure" if invalid_count else "success",
            "count": len(results),
            "valid_count": sum(1 for result in results if result.validity is Validity.VALID),
            "test_count": sum(1 for result in results if result.validity is Validity.TEST),
            "invalid_count": invalid_count,
            "duration": time.time() - start,
        },
    )

    if invalid_count:
        sys.exit(1)


def _generate_batch(
    generator_config: GeneratorConfig,
    count: int,
    rng: Optional[random.Random],
    strict: bool,
) -> list[str]:
    """Generate a batch, raising GenerationError for a short batch in strict mode."""
    pids = generate_many(generator_config, count, rng)
    if strict and len(pids) < count:
        raise GenerationError(
            f"Generated {len(pids)} of {count} requested PIDs. "
            f"Fix: Check the year range {generator_config.min_year}-"
            f"{generator_config.max_year}."
        )
    return pids


@click.command("generate")
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=None,
    help="Number of PIDs to generate (default from config: 10)",
)
@click.option(
    "--real/--test",
    "real",
    default=None,
    help="Generate ordinary PIDs (--real) or test PIDs (--test)",
)
@click.option("--min-year", type=int, default=None, help="Lowest year of birth (>= 1800)")
@click.option("--max-year", type=int, default=None, help="Highest year of birth (<= 2099)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible output")
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if fewer PIDs than requested were generated",
)
@click.pass_context
def generate_command(
    ctx: click.Context,
    count: Optional[int],
    real: Optional[bool],
    min_year: Optional[int],
    max_year: Optional[int],
    seed: Optional[int],
    strict: bool,
) -> None:
    """Generate random Finnish PIDs for test data.

    Options not given on the command line come from the configuration file
    and FI_PID_* environment variables. The same PID may appear more than
    once in a batch.

    Examples:

        # Ten ordinary PIDs for persons born 1966-2042
        fi-pid-util generate

        # Five test PIDs for persons born in the 1800s
        fi-pid-util generate --count 5 --test --min-year 1800 --max-year 1899

        # Reproducible output
        fi-pid-util generate --seed 42
    """
    settings = _get_config(ctx).generator

    overrides = {
        "count": count,
        "min_year": min_year,
        "max_year": max_year,
        "validity": None if real is None else (Validity.VALID.value if real else Validity.TEST.value),
    }
    try:
        settings = GeneratorSettings(
            **{
                **settings.model_dump(),
                **{key: value for key, value in overrides.items() if value is not None},
            }
        )
    except ValidationError as e:
        click.secho(f"Error: Invalid generation options:\n{e}", fg="red", err=True)
        sys.exit(1)

    rng = random.Random(seed) if seed is not None else None
    start = time.time()

    try:
        pids = _generate_batch(settings.to_generator_config(), settings.count, rng, strict)
    except GenerationError as e:
        log_audit_event(
            "PIDS_GENERATED",
            {"status": "failure", "requested": settings.count, "error_message": str(e)},
        )
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    for pid in pids:
        click.echo(pid)

    log_audit_event(
        "PIDS_GENERATED",
        {
            "status": "success",
            "count": len(pids),
            "requested": settings.count,
            "validity": settings.validity,
            "years": f"{settings.min_year}-{settings.max_year}",
            "duration": time.time() - start,
        },
    )
