"""
Operation whose outcome is chosen by the caller.
"""

from ..core.result import Result
from ..errors import InterestingError


class InterestingOperation:

    def invoke(self, success: bool) -> Result[str, InterestingError]:
        """Return Ok("interesting") when ``success`` is true, else InterestingError."""
        if success:
            return Result.from_ok("interesting")
        return Result.from_error(InterestingError())
