"""
Higher Service.

Turns sample service results into user-facing messages.
"""

from typing import Optional

from ..core.logging_config import get_logger
from ..core.result import Error, Ok
from ..errors import AddNegativeError, NotFoundError, SampleServiceError
from .sample_service import SampleService

logger = get_logger(__name__)


class HigherService:
    """Presents SampleService outcomes as messages."""

    def __init__(self, sample_service: Optional[SampleService] = None):
        self.sample_service = sample_service or SampleService()

    def handle_specific_errors(self, name: str) -> str:
        """
        Describe the sample result, with a message per error kind.

        Raises:
            NotImplementedError: For a sample service error with no message
        """
        match self.sample_service.get_result(name):
            case Ok(value):
                return f"Very important number is {value}"
            case Error(AddNegativeError()):
                return "Cannot add negative numbers"
            case Error(NotFoundError()):
                return "Could not find sample"
            case Error(error):
                raise NotImplementedError(f"Unhandled sample service error: {type(error).__name__}")

    def handle_generic_error(self, name: str) -> str:
        """Describe the sample result, with one message for any error."""
        value = self.sample_service.get_result(name).get_value()

        if isinstance(value, int):
            return f"Very important number is {value}"
        if isinstance(value, SampleServiceError):
            logger.warning(f"Sample '{name}' failed with {type(value).__name__}")
            return "Something went boom?"

        raise NotImplementedError(f"Unhandled sample service result: {type(value).__name__}")
