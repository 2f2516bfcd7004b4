"""Verification of Finnish personal identity codes (PIDs).

A PID is checked in order, stopping at the first failing step:

1. Length is exactly 11 characters
2. The 7th character is a known century character
3. The first six characters are a valid ``DDMMYY`` date in that century
4. The control character matches the checksum of the nine digits
5. The individual number is in the ordinary (2-899) or test (900-999) range

Any failure yields an INVALID result. ``verify`` never raises for string
input.
"""

import logging
from datetime import date

from fi_pid_util.models.pid import Gender, Validity, VerificationResult
from fi_pid_util.pid.constants import (
    ASCII_DIGITS,
    CENTURY_CHARACTERS,
    CENTURY_INDEX,
    CHECKSUM_CHARACTERS,
    CHECKSUM_DIVISOR,
    PID_LENGTH,
    TEST_INDIVIDUAL_NUMBERS,
    VALID_INDIVIDUAL_NUMBERS,
)

logger = logging.getLogger(__name__)


def _is_ascii_digits(value: str) -> bool:
    # str.isdigit() accepts non-ASCII digits and superscripts
    return bool(value) and all(char in ASCII_DIGITS for char in value)


def checksum_character(digits: str) -> str:
    """Calculate the control character for the nine PID digits.

    Args:
        digits: ``DDMMYY`` followed by the three digit individual number

    Returns:
        The control character, one of ``0123456789ABCDEFHJKLMNPRSTUVWXY``

    Raises:
        ValueError: If digits is not exactly nine ASCII digits

    Example:
        >>> checksum_character("131052308")
        'T'
    """
    if len(digits) != 9 or not _is_ascii_digits(digits):
        raise ValueError(f"Expected nine ASCII digits, got {digits!r}")
    return CHECKSUM_CHARACTERS[int(digits) % CHECKSUM_DIVISOR]


def _individual_number(pid: str) -> int | None:
    if len(pid) != PID_LENGTH:
        return None
    number = pid[7:10]
    if not _is_ascii_digits(number):
        return None
    return int(number)


def _birth_date(date_part: str, century: int) -> date | None:
    if len(date_part) != 6 or not _is_ascii_digits(date_part):
        return None
    day = int(date_part[0:2])
    month = int(date_part[2:4])
    year = century + int(date_part[4:6])
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _has_correct_control_character(pid: str) -> bool:
    digits = pid[:6] + pid[7:10]
    if not _is_ascii_digits(digits):
        return False
    return checksum_character(digits) == pid[10]


def verify(pid: str) -> VerificationResult:
    """Verify a Finnish PID string.

    Args:
        pid: The string to verify, for example ``"010101-123N"``

    Returns:
        VerificationResult describing validity, gender and birth date.
        Malformed input of any kind is reported as Validity.INVALID.

    Raises:
        TypeError: If pid is not a string

    Example:
        >>> result = verify("210911+0785")
        >>> result.validity
        <Validity.VALID: 'valid'>
        >>> result.date_string
        '21.9.1811'
    """
    if not isinstance(pid, str):
        raise TypeError(f"PID must be a string, got {type(pid).__name__}")

    individual_number = _individual_number(pid)
    invalid = VerificationResult(pid=pid, individual_number=individual_number)

    if len(pid) != PID_LENGTH:
        logger.debug(f"PID has length {len(pid)}, expected {PID_LENGTH}")
        return invalid

    century = CENTURY_CHARACTERS.get(pid[CENTURY_INDEX])
    if century is None:
        logger.debug(f"Unknown century character {pid[CENTURY_INDEX]!r}")
        return invalid

    birth_date = _birth_date(pid[:6], century)
    if birth_date is None:
        logger.debug(f"No valid birth date in {pid[:6]!r} for century {century}")
        return invalid

    if not _has_correct_control_character(pid):
        logger.debug("Control character mismatch")
        return invalid

    if individual_number in VALID_INDIVIDUAL_NUMBERS:
        validity = Validity.VALID
    elif individual_number in TEST_INDIVIDUAL_NUMBERS:
        validity = Validity.TEST
    else:
        # 000 and 001 are never issued
        logger.debug(f"Individual number {individual_number} is not in use")
        return invalid

    gender = Gender.FEMALE if individual_number % 2 == 0 else Gender.MALE
    logger.debug(f"Verified {validity.value} PID: {pid}")
    return VerificationResult(
        pid=pid,
        validity=validity,
        gender=gender,
        birth_date=birth_date,
        individual_number=individual_number,
    )


def is_valid_pid(pid: str) -> bool:
    """Return True if pid is a valid, non-test PID."""
    return verify(pid).is_valid
