"""
Sample Service.

Looks up a sample and bumps its value through two additions, exposing the
operations' specific errors as SampleServiceError.
"""

from typing import Optional

from ..core.logging_config import get_logger
from ..core.result import Result
from ..errors import SampleServiceError
from ..operations.add_operation import AddOperation
from ..operations.sample_dto_operation import GetSampleDtoOperation, SampleDto

logger = get_logger(__name__)


class SampleService:
    """
    Service computing a value from a named sample.

    Composes GetSampleDtoOperation and AddOperation, widening each
    operation's error to SampleServiceError.
    """

    def __init__(
        self,
        add_operation: Optional[AddOperation] = None,
        get_sample_dto_operation: Optional[GetSampleDtoOperation] = None
    ):
        """
        Initialize sample service.

        Args:
            add_operation: Optional add operation (creates default if None)
            get_sample_dto_operation: Optional lookup operation (creates default if None)
        """
        self.add_operation = add_operation or AddOperation()
        self.get_sample_dto_operation = get_sample_dto_operation or GetSampleDtoOperation()

    def get_result(self, sample_name: str) -> Result[int, SampleServiceError]:
        """
        Get the sample's value plus two.

        Args:
            sample_name: Name of the sample to look up

        Returns:
            Result with the computed value, NotFoundError for an unknown
            sample, or AddNegativeError for a negative sample value
        """
        result = (
            self.get_sample_dto_operation.get(sample_name)
            .convert_error_type()
            .continue_with(self._add_twice)
        )
        self._log_outcome(sample_name, result)
        return result

    async def get_result_async(self, sample_name: str) -> Result[int, SampleServiceError]:
        """Awaitable form of ``get_result``."""
        dto_result = await self.get_sample_dto_operation.get_async(sample_name)
        result = await dto_result.convert_error_type().continue_with_async(self._add_twice_async)
        self._log_outcome(sample_name, result)
        return result

    def _add_twice(self, dto: SampleDto) -> Result[int, SampleServiceError]:
        return (
            self.add_operation.add(dto.something, 1)
            .continue_with(lambda total: self.add_operation.add(total, 1))
            .convert_error_type()
        )

    async def _add_twice_async(self, dto: SampleDto) -> Result[int, SampleServiceError]:
        return self._add_twice(dto)

    def _log_outcome(self, sample_name: str, result: Result[int, SampleServiceError]):
        if result.is_error():
            logger.debug(f"Sample '{sample_name}' failed with {type(result.error).__name__}")
        else:
            logger.debug(f"Sample '{sample_name}' resolved to {result.ok}")
