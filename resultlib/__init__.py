"""
resultlib: a two-variant Result type for composing fallible operations
without exceptions.
"""

from .core import (
    Result,
    Ok,
    Error,
    ResultError,
    InvalidResultArgumentError,
    InvalidResultStateError,
)

__version__ = '1.0.0'

__all__ = [
    'Result',
    'Ok',
    'Error',
    'ResultError',
    'InvalidResultArgumentError',
    'InvalidResultStateError',
]
