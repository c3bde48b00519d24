"""
Exception hierarchy for misuse of the Result type.

These signal programmer errors (building a Result from None, or extracting
the wrong variant). Domain failures are never raised; they travel as the
payload of an Error result.
"""

from typing import Optional


class ResultError(Exception):
    """Base exception for all Result misuse errors."""
    pass


class InvalidResultArgumentError(ResultError, ValueError):
    """Raised when a Result is constructed from a None payload."""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class InvalidResultStateError(ResultError, RuntimeError):
    """Raised when the wrong variant is extracted from a Result."""

    def __init__(self, message: str, held_type: Optional[type] = None):
        super().__init__(message)
        self.held_type = held_type
