"""
Operation whose outcome is chosen by the caller.
"""

from ..core.result import Result
from ..errors import OtherError


class OtherOperation:

    def invoke(self, success: bool) -> Result[str, OtherError]:
        """Return Ok("other") when ``success`` is true, else OtherError."""
        if success:
            return Result.from_ok("other")
        return Result.from_error(OtherError())
