"""Tests for the mockwire exception hierarchy."""

from typing import Protocol

import pytest

from mockwire.kernel.exceptions import (
    MockCreationError,
    MockInvariantError,
    MockReferenceError,
    MockwireError,
    UnexpectedInvocationError,
)
from mockwire.mock.context import MockContext
from mockwire.mock.invocation import Invocation
from mockwire.mock.mock import Mock


class Greeter(Protocol):
    def say_hi(self, name: str) -> str: ...


class TestMockwireError:
    def test_basic_creation(self):
        exc = MockwireError("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = MockwireError("bad mock", code="MOCK_X", context={"contract": "Greeter"})
        assert exc.code == "MOCK_X"
        assert exc.context["contract"] == "Greeter"

    def test_context_not_shared_between_instances(self):
        exc = MockwireError("a")
        exc.context["key"] = "value"
        assert MockwireError("b").context == {}


class TestExceptionHierarchy:
    def test_creation_error_is_mockwire(self):
        assert issubclass(MockCreationError, MockwireError)
        assert MockCreationError("x").code == "MOCK_CREATION"

    def test_reference_error_is_mockwire(self):
        assert issubclass(MockReferenceError, MockwireError)
        assert MockReferenceError("x").code == "MOCK_REFERENCE"

    def test_unexpected_invocation_is_mockwire_and_assertion(self):
        assert issubclass(UnexpectedInvocationError, MockwireError)
        assert issubclass(UnexpectedInvocationError, AssertionError)

    def test_invariant_error_is_not_mockwire(self):
        assert issubclass(MockInvariantError, RuntimeError)
        assert not issubclass(MockInvariantError, MockwireError)

    def test_invariant_error_message_and_details(self):
        exc = MockInvariantError("constructing twice!", mock="g1")
        assert str(exc) == "BUG: constructing twice!"
        assert exc.details == {"mock": "g1"}


class TestUnexpectedInvocationError:
    def test_message_describes_invocation(self):
        greeter = Mock.create(Greeter, "g1", context=MockContext())
        invocation = Invocation(Mock.resolve(greeter), greeter, "say_hi", args=("Ada",))
        exc = UnexpectedInvocationError(invocation)
        assert str(exc) == "unexpected invocation: g1.say_hi('Ada')"
        assert exc.invocation is invocation
        assert exc.code == "UNEXPECTED_INVOCATION"
        assert exc.context == {"mock": "g1", "method": "say_hi"}

    def test_caught_as_assertion_error(self):
        greeter = Mock.create(Greeter, context=MockContext())
        with pytest.raises(AssertionError):
            greeter.say_hi("Ada")
