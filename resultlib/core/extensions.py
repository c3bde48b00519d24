"""
Free-function forms of the Result combinators.

Useful where a plain callable is handier than a bound method, e.g. when
passing ``is_ok`` to ``filter`` or composing calls in a pipeline. Each
function has the same semantics as the ``Result`` method of the same name.
"""

from typing import Any, Awaitable, Callable, Optional

from .result import Result, TError, TError2, TOk, TOk2


def with_error_type(
    result: Result[TOk, TError],
    converter: Optional[Callable[[TError], TError2]] = None
) -> Result[TOk, TError2]:
    """
    Convert the Error type of a result to a more generic type.

    Args:
        result: The result to operate on
        converter: Optional function mapping the error into the new type

    Returns:
        The converted result
    """
    return result.convert_error_type(converter)


def continue_with(
    result: Result[TOk, TError],
    continuation: Callable[[TOk], Result[TOk2, TError]]
) -> Result[TOk2, TError]:
    """Run ``continuation`` if ``result`` is Ok, else return its error."""
    return result.continue_with(continuation)


def continue_with_action(result: Result[TOk, TError], action: Callable[[TOk], Any]) -> None:
    """Run ``action`` with the Ok value of ``result``; do nothing on Error."""
    result.continue_with_action(action)


async def continue_with_async(
    result: Result[TOk, TError],
    continuation: Callable[[TOk], Awaitable[Result[TOk2, TError]]]
) -> Result[TOk2, TError]:
    """Await ``continuation`` if ``result`` is Ok, else return its error without suspending."""
    return await result.continue_with_async(continuation)


async def continue_with_action_async(
    result: Result[TOk, TError],
    action: Callable[[TOk], Awaitable[Any]]
) -> None:
    await result.continue_with_action_async(action)


def is_ok(result: Result[TOk, TError]) -> bool:
    return result.is_ok()


def is_error(result: Result[TOk, TError]) -> bool:
    return result.is_error()


def as_ok(result: Result[TOk, TError]) -> TOk:
    """
    Get the result's Ok value or raise.

    Raises:
        InvalidResultStateError: If the result is an Error
    """
    return result.as_ok()


def as_error(result: Result[TOk, TError]) -> TError:
    """
    Get the result's Error value or raise.

    Raises:
        InvalidResultStateError: If the result is Ok
    """
    return result.as_error()
