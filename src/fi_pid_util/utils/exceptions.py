"""Custom exception classes for fi_pid_util.

All exceptions inherit from FiPidUtilError to allow catching all custom exceptions.
PID verification itself never raises; malformed PIDs are reported as
Validity.INVALID results.
"""


class FiPidUtilError(Exception):
    """Base exception for all fi_pid_util custom exceptions."""

    pass


class ConfigurationError(FiPidUtilError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Invalid configuration file format
        - Year range outside 1800-2099
        - Unknown log level
    """

    pass


class GenerationError(FiPidUtilError):
    """Raised when a PID batch cannot be generated as requested.

    Examples:
        - Fewer PIDs than requested in strict mode
    """

    pass
