"""
Core module providing the Result type.

Includes the Result variants, their free-function combinators, and the
exceptions raised on Result misuse.
"""

from .exceptions import ResultError, InvalidResultArgumentError, InvalidResultStateError
from .result import Result, Ok, Error
from . import extensions

__all__ = [
    'Result',
    'Ok',
    'Error',
    'ResultError',
    'InvalidResultArgumentError',
    'InvalidResultStateError',
    'extensions',
]
