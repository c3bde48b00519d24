"""
Addition of non-negative integers.
"""

from ..core.result import Result
from ..errors import AddNegativeError


class AddOperation:
    """Adds two non-negative integers."""

    def add(self, x: int, y: int) -> Result[int, AddNegativeError]:
        """
        Add two numbers.

        Args:
            x: First operand
            y: Second operand

        Returns:
            Result with the sum, or AddNegativeError if either operand is negative
        """
        if x < 0 or y < 0:
            return Result.from_error(AddNegativeError())

        return Result.from_ok(x + y)
