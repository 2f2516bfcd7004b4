"""Custom log formatters for fi_pid_util.

This module provides specialized formatters for logging, including PID redaction.
"""

import logging
import re

# DDMMYY, century character, individual number and control character,
# not embedded in a longer alphanumeric run
PID_PATTERN = re.compile(
    r"(?<![0-9A-Za-z])\d{6}[-+A-FU-Y]\d{3}[0-9A-FHJ-NPR-Y](?![0-9A-Za-z])"
)
PID_REPLACEMENT = "[PID-REDACTED]"


class PIDRedactingFormatter(logging.Formatter):
    """Formatter that redacts Finnish personal identity codes from log messages.

    Verifying and generating PIDs logs the PIDs themselves. When redaction is
    enabled, anything shaped like a PID is replaced with ``[PID-REDACTED]``
    before the record is written. The check is purely syntactic: a string
    with a wrong control character is redacted as well.

    Attributes:
        redact_pii: Whether to enable PID redaction

    Example:
        >>> formatter = PIDRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_pii=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record, redacting PIDs if enabled."""
        message = super().format(record)
        if not self.redact_pii:
            return message
        return PID_PATTERN.sub(PID_REPLACEMENT, message)
