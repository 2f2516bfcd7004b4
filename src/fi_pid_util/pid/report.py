"""Presentation helpers for verification results.

Output is plain English and not localized. Callers needing other languages
should build their own text from the structured VerificationResult fields.
"""

from typing import Any, Iterable

from fi_pid_util.models.pid import Validity, VerificationResult

_DESCRIPTIONS = {
    Validity.VALID: "Valid PID: {pid}, born: {born}, gender: {gender}",
    Validity.TEST: "Test PID: {pid}, born: {born}, gender: {gender}",
    Validity.INVALID: "Invalid PID: {pid}",
}


def describe(result: VerificationResult) -> str:
    """Return a one line summary of a verification result.

    Example:
        >>> describe(verify("050301-679T"))
        'Valid PID: 050301-679T, born: 5.3.1901, gender: Male'
    """
    return _DESCRIPTIONS[result.validity].format(
        pid=result.pid,
        born=result.date_string,
        gender=result.gender.value.capitalize(),
    )


def result_to_dict(result: VerificationResult) -> dict[str, Any]:
    """Convert a verification result to a JSON serializable dictionary."""
    return {
        "pid": result.pid,
        "validity": result.validity.value,
        "is_valid": result.is_valid,
        "gender": result.gender.value,
        "birth_date": result.birth_date.isoformat() if result.birth_date else None,
        "date_string": result.date_string,
        "individual_number": result.individual_number,
    }


def sort_results(results: Iterable[VerificationResult]) -> list[VerificationResult]:
    """Sort results by birth date and individual number.

    VALID results come first in ascending order. Test and invalid results
    follow in their input order. The result ordering alone is not a total
    order once non-VALID entries are mixed in, so ``sorted()`` on such a
    list does not guarantee this placement.
    """
    results = list(results)
    valid = sorted(result for result in results if result.is_valid)
    rest = [result for result in results if not result.is_valid]
    return valid + rest
