"""
Services module for business logic orchestration.

Composes operations into higher level results.
"""

from .sample_service import SampleService
from .other_service import OtherService
from .higher_service import HigherService

__all__ = [
    'SampleService',
    'OtherService',
    'HigherService',
]
