"""
Tests for the Result type.

Tests construction, introspection, extraction, error type conversion and
synchronous continuation.
"""

import pytest
from resultlib.core.result import Result, Ok, Error
from resultlib.core.exceptions import (
    ResultError,
    InvalidResultArgumentError,
    InvalidResultStateError,
)


class SharedError:
    """Shared error base type for tests."""
    pass


class ConcreteError(SharedError):
    pass


class OtherConcreteError(SharedError):
    pass


class TestConstruction:
    """Test Result factories."""

    def test_from_ok(self):
        """Test from_ok builds an Ok result."""
        result = Result.from_ok("hi")

        assert isinstance(result, Ok)
        assert result.is_ok()
        assert not result.is_error()

    def test_from_error(self):
        """Test from_error builds an Error result."""
        error = ConcreteError()
        result = Result.from_error(error)

        assert isinstance(result, Error)
        assert result.is_error()
        assert not result.is_ok()

    def test_from_subscripted_alias(self):
        """Test factories work on a parameterized Result."""
        result = Result[int, SharedError].from_ok(1)

        assert result == Ok(1)

    def test_from_ok_none_raises(self):
        """Test from_ok rejects None."""
        with pytest.raises(InvalidResultArgumentError) as exc_info:
            Result.from_ok(None)
        assert exc_info.value.argument == 'ok'

    def test_from_error_none_raises(self):
        """Test from_error rejects None."""
        with pytest.raises(InvalidResultArgumentError) as exc_info:
            Result.from_error(None)
        assert exc_info.value.argument == 'error'

    def test_variant_constructor_none_raises(self):
        """Test Ok and Error constructors validate like the factories."""
        with pytest.raises(InvalidResultArgumentError):
            Ok(None)
        with pytest.raises(InvalidResultArgumentError):
            Error(None)

    def test_construction_violation_is_value_error(self):
        """Test construction violations are ValueErrors."""
        with pytest.raises(ValueError):
            Result.from_ok(None)

    def test_falsy_values_allowed(self):
        """Test only None is rejected."""
        assert Result.from_ok(0).as_ok() == 0
        assert Result.from_ok("").as_ok() == ""
        assert Result.from_error(False).as_error() is False

    def test_base_not_instantiable(self):
        """Test Result itself cannot be instantiated."""
        with pytest.raises(TypeError):
            Result()

    def test_immutable(self):
        """Test results cannot be modified."""
        result = Result.from_ok(1)

        with pytest.raises(AttributeError):
            result.value = 2


class TestIntrospection:
    """Test variant checks and value access."""

    def test_get_value_ok(self):
        """Test get_value returns the Ok value."""
        assert Result.from_ok("hi").get_value() == "hi"

    def test_get_value_error(self):
        """Test get_value returns the error instance."""
        error = ConcreteError()

        assert Result.from_error(error).get_value() is error

    def test_ok_and_error_properties(self):
        """Test the nullable accessors."""
        error = ConcreteError()
        ok_result = Result.from_ok("hi")
        error_result = Result.from_error(error)

        assert ok_result.ok == "hi"
        assert ok_result.error is None
        assert error_result.ok is None
        assert error_result.error is error

    def test_pattern_matching(self):
        """Test results can be matched by variant."""
        def describe(result):
            match result:
                case Ok(value):
                    return f"ok:{value}"
                case Error(ConcreteError()):
                    return "concrete"
                case Error(error):
                    return f"error:{type(error).__name__}"

        assert describe(Result.from_ok(3)) == "ok:3"
        assert describe(Result.from_error(ConcreteError())) == "concrete"
        assert describe(Result.from_error(OtherConcreteError())) == "error:OtherConcreteError"

    def test_equality(self):
        """Test equality compares variant and value."""
        assert Result.from_ok(1) == Result.from_ok(1)
        assert Result.from_ok(1) != Result.from_ok(2)
        assert Result.from_ok("x") != Result.from_error("x")
        assert hash(Result.from_ok(1)) == hash(Ok(1))

    def test_repr(self):
        """Test repr shows variant and value."""
        assert repr(Result.from_ok(1)) == "Ok(1)"
        assert repr(Result.from_error("bad")) == "Error('bad')"


class TestExtraction:
    """Test as_ok and as_error."""

    def test_as_ok_returns_value(self):
        """Test as_ok on an Ok result."""
        assert Result.from_ok("hi").as_ok() == "hi"

    def test_as_ok_raises_on_error(self):
        """Test as_ok on an Error result raises."""
        result = Result.from_error(ConcreteError())

        with pytest.raises(InvalidResultStateError):
            result.as_ok()

    def test_as_ok_message_names_concrete_type(self):
        """Test the message names the held error type, not its base."""
        result = Result[str, SharedError].from_error(ConcreteError())

        with pytest.raises(InvalidResultStateError) as exc_info:
            result.as_ok()
        assert "ConcreteError" in str(exc_info.value)
        assert "SharedError" not in str(exc_info.value)
        assert exc_info.value.held_type is ConcreteError

    def test_as_ok_message_after_widening(self):
        """Test the concrete type is still reported after widening."""
        result = Result.from_error(OtherConcreteError()).convert_error_type()

        with pytest.raises(InvalidResultStateError) as exc_info:
            result.as_ok()
        assert "OtherConcreteError" in str(exc_info.value)

    def test_as_error_returns_same_instance(self):
        """Test as_error returns the error itself."""
        error = ConcreteError()

        assert Result.from_error(error).as_error() is error

    def test_as_error_raises_on_ok(self):
        """Test as_error on an Ok result raises."""
        with pytest.raises(InvalidResultStateError) as exc_info:
            Result.from_ok("hi").as_error()
        assert "str" in str(exc_info.value)

    def test_state_violation_is_runtime_error(self):
        """Test wrong-variant access errors share the ResultError base."""
        with pytest.raises(RuntimeError):
            Result.from_ok(1).as_error()
        with pytest.raises(ResultError):
            Result.from_ok(1).as_error()


class TestConvertErrorType:
    """Test error type conversion."""

    def test_ok_passes_through(self):
        """Test Ok values are kept."""
        value = object()
        result = Result.from_ok(value).convert_error_type()

        assert result.is_ok()
        assert result.as_ok() is value

    def test_error_keeps_instance(self):
        """Test the error instance is carried over."""
        error = ConcreteError()
        result = Result.from_error(error).convert_error_type()

        assert result.is_error()
        assert result.as_error() is error
        assert isinstance(result.get_value(), SharedError)

    def test_converter_applied_to_error(self):
        """Test a converter maps the error."""
        result = Result.from_error(ConcreteError()).convert_error_type(
            lambda e: type(e).__name__
        )

        assert result.as_error() == "ConcreteError"

    def test_converter_not_applied_to_ok(self):
        """Test a converter is ignored for Ok results."""
        calls = []
        result = Result.from_ok(1).convert_error_type(calls.append)

        assert result == Ok(1)
        assert calls == []


class TestContinueWith:
    """Test synchronous continuation."""

    def test_ok_returns_continuation_result(self):
        """Test Ok runs the continuation once and returns its result."""
        calls = []
        inner = Result.from_ok(1)

        def continuation(ok):
            calls.append(ok)
            return inner

        result = Result.from_ok("hi").continue_with(continuation)

        assert calls == ["hi"]
        assert result is inner

    def test_ok_increments(self):
        """Test Ok(5) continued with +1 gives Ok(6)."""
        result = Result.from_ok(5).continue_with(lambda x: Result.from_ok(x + 1))

        assert result == Ok(6)

    def test_error_skips_continuation(self):
        """Test Error never runs the continuation and keeps the error."""
        calls = []
        error = ConcreteError()

        def continuation(ok):
            calls.append(ok)
            return Result.from_ok(1)

        result = Result.from_error(error).continue_with(continuation)

        assert calls == []
        assert result.is_error()
        assert result.as_error() is error

    def test_error_string_payload(self):
        """Test Error("bad") continued stays Error("bad")."""
        result = Result.from_error("bad").continue_with(lambda x: Result.from_ok(x + 1))

        assert result == Error("bad")

    def test_continuation_error_propagates(self):
        """Test an error produced by the continuation is returned."""
        error = ConcreteError()

        result = Result.from_ok(1).continue_with(lambda _: Result.from_error(error))

        assert result.as_error() is error

    def test_nested_chain_returns_final_ok(self):
        """Test nested continuations return the innermost Ok."""
        captured = []

        def outer(ok):
            captured.append(ok)

            def inner(ok2):
                captured.append(ok2)
                return Result.from_ok(1)

            return Result.from_ok("text2").continue_with(inner)

        result = Result.from_ok("hi").continue_with(outer)

        assert captured == ["hi", "text2"]
        assert result == Ok(1)

    def test_nested_chain_returns_first_error(self):
        """Test nested continuations return the first error."""
        error = ConcreteError()
        captured = []

        def outer(ok):
            captured.append(ok)
            return Result.from_error(error).continue_with(
                lambda ok2: captured.append(ok2) or Result.from_ok(1)
            )

        result = Result.from_ok("hi").continue_with(outer)

        assert captured == ["hi"]
        assert result.as_error() is error

    def test_flat_chain_short_circuits_at_first_error(self):
        """Test three chained continuations stop at the first error."""
        first = ConcreteError()
        second = OtherConcreteError()
        calls = []

        def second_step(ok):
            calls.append('second')
            return Result.from_error(second)

        def third_step(ok):
            calls.append('third')
            return Result.from_ok(ok)

        result = (
            Result.from_ok(1)
            .continue_with(lambda _: Result.from_error(first))
            .continue_with(second_step)
            .continue_with(third_step)
        )

        assert calls == []
        assert result.as_error() is first

    def test_chain_runs_in_order(self):
        """Test continuations run in composition order."""
        calls = []

        def step(name):
            def run(ok):
                calls.append(name)
                return Result.from_ok(ok + 1)
            return run

        result = (
            Result.from_ok(0)
            .continue_with(step('a'))
            .continue_with(step('b'))
            .continue_with(step('c'))
        )

        assert calls == ['a', 'b', 'c']
        assert result == Ok(3)


class TestContinueWithAction:
    """Test side-effecting continuation."""

    def test_runs_if_ok(self):
        """Test the action sees the Ok value."""
        captured = []

        returned = Result.from_ok("hi").continue_with_action(captured.append)

        assert captured == ["hi"]
        assert returned is None

    def test_skipped_if_error(self):
        """Test the action is skipped for an Error."""
        captured = []

        Result.from_error(ConcreteError()).continue_with_action(captured.append)

        assert captured == []
