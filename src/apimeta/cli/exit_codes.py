"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (parameters, config, resources)
    20-29: Lookup errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for apimeta CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1

    # Validation errors (10-19)
    PARAMETER_ERROR = 10
    CONFIG_ERROR = 11
    INVALID_RESOURCE = 12

    # Lookup errors (20-29)
    RESOURCE_NOT_FOUND = 20
