"""
Result objects for functional error handling.

A Result holds either a success value (``Ok``) or an error value (``Error``),
never both. Fallible operations return one instead of raising, and callers
compose them with the ``continue_with`` family of combinators. A chain stops
at the first Error and hands that same error to the end of the chain.

Example:
    result = Result.from_ok(5).continue_with(lambda x: Result.from_ok(x + 1))
    assert result == Ok(6)

    match result:
        case Ok(value):
            ...
        case Error(error):
            ...
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from .exceptions import InvalidResultArgumentError, InvalidResultStateError

TOk = TypeVar('TOk')
TOk2 = TypeVar('TOk2')
TError = TypeVar('TError')
TError2 = TypeVar('TError2')


class Result(Generic[TOk, TError]):
    """
    Outcome of an operation: either ``Ok`` or ``Error``.

    Instances are immutable. Create them with ``Result.from_ok`` or
    ``Result.from_error`` (or the ``Ok`` / ``Error`` constructors, which
    apply the same validation).
    """

    value: Any

    def __init__(self, *args, **kwargs):
        raise TypeError(
            "Result cannot be instantiated directly; "
            "use Result.from_ok or Result.from_error"
        )

    @classmethod
    def from_ok(cls, ok: TOk) -> 'Result[TOk, TError]':
        """
        Create a result containing an Ok value.

        Raises:
            InvalidResultArgumentError: If ``ok`` is None
        """
        return Ok(ok)

    @classmethod
    def from_error(cls, error: TError) -> 'Result[TOk, TError]':
        """
        Create a result containing an Error value.

        Raises:
            InvalidResultArgumentError: If ``error`` is None
        """
        return Error(error)

    @property
    def ok(self) -> Optional[TOk]:
        """The success value, or None if this is an Error."""
        return self.value if self.is_ok() else None

    @property
    def error(self) -> Optional[TError]:
        """The error value, or None if this is Ok."""
        return self.value if self.is_error() else None

    def is_ok(self) -> bool:
        """Check if result is Ok."""
        return isinstance(self, Ok)

    def is_error(self) -> bool:
        """Check if result is an Error."""
        return isinstance(self, Error)

    def get_value(self) -> Any:
        """
        Get either the contained Ok or Error value.

        Lets a caller branch on the payload type (the Ok type or any concrete
        error type) with a single ``isinstance`` chain.
        """
        return self.value

    def as_ok(self) -> TOk:
        """
        Get the Ok value or raise.

        Only use this when the result is known to be Ok. Otherwise prefer
        matching on ``Ok`` / ``Error`` or branching on ``get_value()``.

        Raises:
            InvalidResultStateError: If the result is an Error. The message
                names the concrete type of the error actually held.
        """
        if self.is_error():
            held_type = type(self.value)
            raise InvalidResultStateError(
                f"Expected an Ok result but it holds an error of type {held_type.__name__}",
                held_type=held_type,
            )
        return self.value

    def as_error(self) -> TError:
        """
        Get the Error value or raise.

        Raises:
            InvalidResultStateError: If the result is Ok. The message names
                the concrete type of the value actually held.
        """
        if self.is_ok():
            held_type = type(self.value)
            raise InvalidResultStateError(
                f"Expected an Error result but it holds an ok value of type {held_type.__name__}",
                held_type=held_type,
            )
        return self.value

    def convert_error_type(
        self,
        converter: Optional[Callable[[TError], TError2]] = None
    ) -> 'Result[TOk, TError2]':
        """
        Convert the Error type of the result to a more generic type.

        Ok values and error instances are carried over as-is. Widening to a
        base class needs no converter; pass one to inject an error into an
        unrelated type.

        Args:
            converter: Optional function mapping the error into the new type

        Returns:
            A new result typed with the wider error type
        """
        if self.is_ok():
            return Ok(self.value)
        if converter is None:
            return Error(self.value)
        return Error(converter(self.value))

    def continue_with(
        self,
        continuation: Callable[[TOk], 'Result[TOk2, TError]']
    ) -> 'Result[TOk2, TError]':
        """
        Run ``continuation`` if the result is Ok, else return immediately.

        Args:
            continuation: Function called with the Ok value

        Returns:
            The continuation's result, or a new Error carrying this result's
            error unchanged
        """
        if self.is_ok():
            return continuation(self.value)
        return Error(self.value)

    def continue_with_action(self, action: Callable[[TOk], Any]) -> None:
        """Run ``action`` with the Ok value for its side effects; do nothing on Error."""
        if self.is_ok():
            action(self.value)

    async def continue_with_async(
        self,
        continuation: Callable[[TOk], Awaitable['Result[TOk2, TError]']]
    ) -> 'Result[TOk2, TError]':
        """
        Await ``continuation`` if the result is Ok, else return immediately.

        The Error path never suspends: the continuation is neither called nor
        awaited.
        """
        if self.is_error():
            return Error(self.value)
        return await continuation(self.value)

    async def continue_with_action_async(
        self,
        action: Callable[[TOk], Awaitable[Any]]
    ) -> None:
        """Await ``action`` with the Ok value; complete immediately on Error."""
        if self.is_ok():
            await action(self.value)


@dataclass(frozen=True)
class Ok(Result[TOk, TError]):
    """Success case of a Result."""

    __match_args__ = ('value',)

    value: TOk

    def __post_init__(self):
        if self.value is None:
            raise InvalidResultArgumentError("ok must not be None", argument='ok')

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Error(Result[TOk, TError]):
    """Error case of a Result."""

    __match_args__ = ('value',)

    value: TError

    def __post_init__(self):
        if self.value is None:
            raise InvalidResultArgumentError("error must not be None", argument='error')

    def __repr__(self) -> str:
        return f"Error({self.value!r})"
