"""Audit trail functionality for fi_pid_util.

This module provides structured audit logging for PID verification and
generation runs.
"""

import time
import uuid
from typing import Any, Dict

from .logger import get_logger

logger = get_logger(__name__)

# Key fields are written first, in this order
FIELD_ORDER = [
    "status",
    "count",
    "requested",
    "valid_count",
    "test_count",
    "invalid_count",
    "duration",
    "error_message",
    "correlation_id",
]


def log_audit_event(event_type: str, details: Dict[str, Any]) -> None:
    """Log an audit trail event.

    Creates a single line audit entry. Events are logged at INFO level, or
    ERROR level when ``details["status"]`` is ``"failure"``.

    Args:
        event_type: Type of operation (e.g., "PIDS_VERIFIED", "PIDS_GENERATED")
        details: Dictionary with event details. Common fields include:
                - status: "success" or "failure"
                - count: Number of PIDs processed
                - duration: Operation duration in seconds
                - error_message: Error details (if status is failure)
                - correlation_id: Optional ID tying related events together

    Example:
        >>> log_audit_event("PIDS_GENERATED", {
        ...     "status": "success",
        ...     "count": 10,
        ...     "validity": "test",
        ...     "duration": 0.01,
        ... })
    """
    details = dict(details)
    details.setdefault("timestamp", time.time())
    details.setdefault("correlation_id", str(uuid.uuid4()))

    message_parts = [f"AUDIT [{event_type}]"]

    for field in FIELD_ORDER:
        if field in details:
            value = details[field]
            if field == "duration" and isinstance(value, (int, float)):
                message_parts.append(f"{field}={value:.2f}s")
            else:
                message_parts.append(f"{field}={value}")

    for key, value in details.items():
        if key not in FIELD_ORDER and key != "timestamp":
            message_parts.append(f"{key}={value}")

    audit_message = " | ".join(message_parts)

    if details.get("status") == "failure":
        logger.error(audit_message)
    else:
        logger.info(audit_message)
