"""
Other Service.

Chains two independent operations and the sample service into a single
result typed with OtherServiceError.
"""

from typing import Optional

from ..core.logging_config import get_logger
from ..core.result import Result
from ..errors import AddNegativeError, GenericError, NotFoundError, OtherServiceError
from ..operations.interesting_operation import InterestingOperation
from ..operations.other_operation import OtherOperation
from .sample_service import SampleService

logger = get_logger(__name__)


class OtherService:
    """
    Service orchestrating OtherOperation, InterestingOperation and SampleService.

    The first error encountered is the one returned. Sample service errors
    are translated into GenericError messages.
    """

    def __init__(
        self,
        other_operation: Optional[OtherOperation] = None,
        interesting_operation: Optional[InterestingOperation] = None,
        sample_service: Optional[SampleService] = None
    ):
        self.other_operation = other_operation or OtherOperation()
        self.interesting_operation = interesting_operation or InterestingOperation()
        self.sample_service = sample_service or SampleService()

    def get_result(
        self,
        success1: bool,
        success2: bool,
        sample_name: Optional[str]
    ) -> Result[str, OtherServiceError]:
        """
        Run both operations, then the sample lookup.

        Args:
            success1: Whether OtherOperation succeeds
            success2: Whether InterestingOperation succeeds
            sample_name: Sample to look up once both operations succeed

        Returns:
            Result with "ok", or the first error encountered
        """
        result = (
            self.other_operation.invoke(success1)
            .convert_error_type()
            .continue_with(
                lambda _: self.interesting_operation.invoke(success2)
                .convert_error_type()
                .continue_with(lambda _: self._check_sample(sample_name))
            )
        )

        if result.is_error():
            logger.info(f"Other service failed with {type(result.error).__name__}")
        return result

    def _check_sample(self, sample_name: Optional[str]) -> Result[str, OtherServiceError]:
        value = self.sample_service.get_result(sample_name).get_value()

        if isinstance(value, int):
            return Result.from_ok("ok")
        if isinstance(value, AddNegativeError):
            return Result.from_error(GenericError("Cannot add negative numbers"))
        if isinstance(value, NotFoundError):
            return Result.from_error(GenericError("Sample not found"))

        raise NotImplementedError(f"Unhandled sample service error: {type(value).__name__}")
