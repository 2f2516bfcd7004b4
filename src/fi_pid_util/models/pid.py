"""Finnish personal identity code data models.

This module defines the value objects produced by PID verification and
consumed by PID generation: the validity and gender enumerations, the
immutable verification result and the generator configuration.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Validity(str, Enum):
    """Classification of a verified PID."""

    VALID = "valid"
    INVALID = "invalid"
    TEST = "test"


class Gender(str, Enum):
    """Gender encoded in the individual number of a PID.

    UNDEFINED is used whenever the PID did not verify.
    """

    UNDEFINED = "undefined"
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True, eq=False)
class VerificationResult:
    """Outcome of verifying a single PID string.

    Instances are created by ``fi_pid_util.pid.verifier.verify``. Two results
    are equal when their source strings are equal. Ordering is meaningful
    among VALID results only: earlier birth date first, then smaller
    individual number. A non-VALID result is never less than anything; use
    ``fi_pid_util.pid.report.sort_results`` to sort mixed lists.

    Attributes:
        pid: The verified string, kept verbatim
        validity: VALID, TEST or INVALID
        gender: MALE or FEMALE for VALID/TEST results, UNDEFINED otherwise
        birth_date: Date of birth for VALID/TEST results, None otherwise
        individual_number: The three digit daily sequence number when it
            parses, independent of the overall validity
    """

    pid: str
    validity: Validity = Validity.INVALID
    gender: Gender = Gender.UNDEFINED
    birth_date: date | None = None
    individual_number: int | None = None

    @property
    def is_valid(self) -> bool:
        """True if the PID is valid and *not* a test PID."""
        return self.validity is Validity.VALID

    @property
    def date_string(self) -> str | None:
        """Birth date as ``d.m.yyyy`` without zero padding, or None."""
        if self.birth_date is None:
            return None
        return f"{self.birth_date.day}.{self.birth_date.month}.{self.birth_date.year}"

    @property
    def year(self) -> int | None:
        return self.birth_date.year if self.birth_date else None

    @property
    def month(self) -> int | None:
        return self.birth_date.month if self.birth_date else None

    @property
    def day(self) -> int | None:
        return self.birth_date.day if self.birth_date else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VerificationResult):
            return NotImplemented
        return self.pid == other.pid

    def __hash__(self) -> int:
        return hash(self.pid)

    def __lt__(self, other: "VerificationResult") -> bool:
        if not isinstance(other, VerificationResult):
            return NotImplemented
        if not (self.is_valid and other.is_valid):
            return False
        # Valid results always carry a birth date and an individual number
        if self.birth_date != other.birth_date:
            return self.birth_date < other.birth_date
        return self.individual_number < other.individual_number

    def __gt__(self, other: "VerificationResult") -> bool:
        if not isinstance(other, VerificationResult):
            return NotImplemented
        return other.__lt__(self)

    def __le__(self, other: "VerificationResult") -> bool:
        if not isinstance(other, VerificationResult):
            return NotImplemented
        return self.__lt__(other) or self.__eq__(other)

    def __ge__(self, other: "VerificationResult") -> bool:
        if not isinstance(other, VerificationResult):
            return NotImplemented
        return other.__lt__(self) or self.__eq__(other)


@dataclass(frozen=True)
class GeneratorConfig:
    """Parameters for generating PID strings.

    The year bounds are inclusive. A range outside 1800..2099 can be
    constructed, but the generator produces nothing for it.

    Attributes:
        min_year: Lowest year of birth to generate
        max_year: Highest year of birth to generate
        validity: VALID for ordinary PIDs, TEST for test PIDs
    """

    min_year: int = 1966
    max_year: int = 2042
    validity: Validity = Validity.VALID

    def __post_init__(self) -> None:
        # Accept the plain string values as well, e.g. "test"
        object.__setattr__(self, "validity", Validity(self.validity))
        if self.validity is Validity.INVALID:
            raise ValueError(
                "Invalid PIDs are never generated. "
                "Use Validity.VALID or Validity.TEST"
            )
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) must not be greater than "
                f"max_year ({self.max_year})"
            )
