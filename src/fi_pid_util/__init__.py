"""Finnish personal identity code (henkilötunnus) utility.

Verifies PID strings and generates random valid or test PIDs.
"""

from fi_pid_util.models.pid import Gender, GeneratorConfig, Validity, VerificationResult
from fi_pid_util.pid import generate, generate_many, verify

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Gender",
    "GeneratorConfig",
    "Validity",
    "VerificationResult",
    "generate",
    "generate_many",
    "verify",
]
