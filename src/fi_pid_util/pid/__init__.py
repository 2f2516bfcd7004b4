"""PID module.

This module provides verification and generation of Finnish personal
identity codes.
"""

from fi_pid_util.pid.generator import century_character, generate, generate_many
from fi_pid_util.pid.report import describe, result_to_dict, sort_results
from fi_pid_util.pid.verifier import checksum_character, is_valid_pid, verify

__all__ = [
    # Verification
    "verify",
    "is_valid_pid",
    "checksum_character",
    # Generation
    "generate",
    "generate_many",
    "century_character",
    # Presentation
    "describe",
    "result_to_dict",
    "sort_results",
]
