"""
Operations module.

Small fallible operations that report failure through Result values.
"""

from .add_operation import AddOperation
from .sample_dto_operation import SampleDto, GetSampleDtoOperation
from .other_operation import OtherOperation
from .interesting_operation import InterestingOperation

__all__ = [
    'AddOperation',
    'SampleDto',
    'GetSampleDtoOperation',
    'OtherOperation',
    'InterestingOperation',
]
