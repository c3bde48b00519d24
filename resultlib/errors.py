"""
Domain errors returned by the demo operations and services.

These are payloads for ``Error`` results, not exceptions. Each service
exposes a shared base type so callers can handle its errors generically,
while the concrete subclasses let them handle specific cases.
"""

from dataclasses import dataclass


class SampleServiceError:
    """Base type for errors returned by SampleService."""
    pass


class OtherServiceError:
    """Base type for errors returned by OtherService."""
    pass


class NotFoundError(SampleServiceError):
    """The requested sample does not exist."""
    pass


class AddNegativeError(SampleServiceError):
    """An addition was attempted with a negative operand."""
    pass


class OtherError(OtherServiceError):
    pass


class InterestingError(OtherServiceError):
    pass


@dataclass(frozen=True)
class GenericError(OtherServiceError, SampleServiceError):
    """Error carrying only a message, usable by any service."""

    message: str

    def __post_init__(self):
        if self.message is None:
            raise ValueError("message must not be None")
