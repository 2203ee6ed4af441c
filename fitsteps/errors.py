"""
Error types that abort a step count run.
"""

from typing import Optional


class StepCountError(Exception):
    """Base class for failures that abort the step count run."""

    stage = "unknown"
    exit_code = 1


class ConfigError(StepCountError):
    """Missing or invalid configuration, detected before any network call."""

    stage = "configuration"
    exit_code = 2


class AuthError(StepCountError):
    stage = "authentication"
    exit_code = 3


class TransportError(StepCountError):
    stage = "transport"
    exit_code = 4


class MalformedResponse(StepCountError):
    """The aggregate response does not have the bucket/dataset/point/value shape."""

    stage = "response"
    exit_code = 5

    def __init__(self, level: str, message: Optional[str] = None):
        self.level = level
        super().__init__(message or f"Aggregate response is missing '{level}'")
