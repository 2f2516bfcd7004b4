"""Data models for fi_pid_util."""

from fi_pid_util.models.pid import Gender, GeneratorConfig, Validity, VerificationResult

__all__ = [
    "Gender",
    "GeneratorConfig",
    "Validity",
    "VerificationResult",
]
