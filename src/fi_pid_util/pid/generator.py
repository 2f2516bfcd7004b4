"""Random generation of Finnish PIDs for test data.

Generated PIDs are well formed and carry a correct control character, so
they verify as VALID or TEST depending on the requested validity. INVALID
PIDs are never generated.

Generation is random, so a batch may contain the same PID more than once.
Pass a seeded ``random.Random`` as ``rng`` for reproducible output.
"""

import calendar
import logging
import random
from datetime import date
from typing import Optional

from fi_pid_util.models.pid import GeneratorConfig, Validity
from fi_pid_util.pid.constants import (
    CENTURY_CHARACTERS,
    MAX_YEAR,
    MIN_YEAR,
    TEST_INDIVIDUAL_NUMBERS,
    VALID_INDIVIDUAL_NUMBERS,
)
from fi_pid_util.pid.verifier import checksum_character

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = GeneratorConfig()


def _random_birth_date(config: GeneratorConfig, rng: random.Random) -> Optional[date]:
    year = rng.randint(config.min_year, config.max_year)
    month = rng.randint(1, 12)
    days_in_month = calendar.monthrange(year, month)[1]
    day = rng.randint(1, days_in_month)
    try:
        return date(year, month, day)
    except ValueError:
        return None


def century_character(year: int, rng: Optional[random.Random] = None) -> Optional[str]:
    """Pick a century character for the given year.

    Several characters map to the 1900s and the 2000s; one of them is
    chosen at random.

    Args:
        year: Full year of birth
        rng: Random source, defaults to the ``random`` module

    Returns:
        A century character, or None if no character covers the year
    """
    rng = rng or random
    century = (year // 100) * 100
    candidates = [char for char, base in CENTURY_CHARACTERS.items() if base == century]
    if not candidates:
        return None
    return rng.choice(candidates)


def _check_year_range(config: GeneratorConfig) -> bool:
    """Return True if the PID format covers the configured years, warn otherwise."""
    if config.min_year < MIN_YEAR or config.max_year > MAX_YEAR:
        logger.warning(
            f"Year range {config.min_year}-{config.max_year} is outside "
            f"the supported range {MIN_YEAR}-{MAX_YEAR}"
        )
        return False
    return True


def generate(
    config: Optional[GeneratorConfig] = None,
    rng: Optional[random.Random] = None,
) -> Optional[str]:
    """Generate a single PID.

    Args:
        config: Year range and validity, defaults to 1966-2042 VALID PIDs
        rng: Random source, defaults to the ``random`` module

    Returns:
        An 11 character PID string, or None if the year range is outside
        1800-2099 or generation failed

    Example:
        >>> pid = generate(GeneratorConfig(1990, 1999, Validity.TEST))
        >>> len(pid)
        11
    """
    config = config or DEFAULT_CONFIG
    rng = rng or random

    if not _check_year_range(config):
        return None

    birth_date = _random_birth_date(config, rng)
    if birth_date is None:
        return None

    separator = century_character(birth_date.year, rng)
    if separator is None:
        return None

    if config.validity is Validity.TEST:
        individual_number = rng.choice(TEST_INDIVIDUAL_NUMBERS)
    else:
        individual_number = rng.choice(VALID_INDIVIDUAL_NUMBERS)

    date_part = f"{birth_date.day:02d}{birth_date.month:02d}{birth_date.year % 100:02d}"
    number_part = f"{individual_number:03d}"
    control = checksum_character(date_part + number_part)

    pid = f"{date_part}{separator}{number_part}{control}"
    logger.debug(f"Generated {config.validity.value} PID: {pid}")
    return pid


def generate_many(
    config: Optional[GeneratorConfig] = None,
    count: int = 10,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Generate a batch of PIDs.

    Failed generations are skipped, not retried, so the batch may hold
    fewer than ``count`` PIDs. Callers that need the full count must check
    the length of the result.

    Args:
        config: Year range and validity, defaults to 1966-2042 VALID PIDs
        count: Number of PIDs to generate
        rng: Random source, defaults to the ``random`` module

    Returns:
        List of generated PID strings

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")

    config = config or DEFAULT_CONFIG
    if not _check_year_range(config):
        return []

    pids = []
    for _ in range(count):
        pid = generate(config, rng)
        if pid is not None:
            pids.append(pid)

    if len(pids) < count:
        logger.warning(f"Generated {len(pids)} of {count} requested PIDs")
    else:
        logger.debug(f"Generated {count} PIDs")
    return pids
