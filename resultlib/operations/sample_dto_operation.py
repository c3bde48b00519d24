"""
Lookup of sample DTOs by name.
"""

from dataclasses import dataclass

from ..core.result import Result
from ..errors import NotFoundError

# Known samples and the value each one carries
SAMPLES = {
    'sample': 1,
    'negative': -1,
}


@dataclass(frozen=True)
class SampleDto:
    """A sample record."""

    something: int


class GetSampleDtoOperation:
    """Looks up a SampleDto by name."""

    def get(self, name: str) -> Result[SampleDto, NotFoundError]:
        """
        Get a sample by name.

        Args:
            name: Sample name

        Returns:
            Result with the SampleDto, or NotFoundError for an unknown name
        """
        if name in SAMPLES:
            return Result.from_ok(SampleDto(SAMPLES[name]))

        return Result.from_error(NotFoundError())

    async def get_async(self, name: str) -> Result[SampleDto, NotFoundError]:
        """Awaitable form of ``get``."""
        return self.get(name)
