"""Unified exception hierarchy for mockwire.

Every error a test author can provoke inherits from MockwireError, enabling
``except MockwireError`` around mock set-up code.

Categories:
- MockCreationError: the substitute object for a contract cannot be built
- MockReferenceError: an object that is not a substitute was passed where one
  is required
- UnexpectedInvocationError: a substitute received a call nobody handles

MockInvariantError sits outside the hierarchy on purpose: it reports a bug in
the dispatcher's own collaborators, never a mistake in test code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mockwire.mock.invocation import Invocation


# =============================================================================
# Base Exception
# =============================================================================


class MockwireError(Exception):
    """Base exception for all user-facing mockwire errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "MOCK_CREATION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Mock Lifecycle Exceptions
# =============================================================================


class MockCreationError(MockwireError):
    """The substitute object for a contract could not be generated.

    The underlying failure is chained as ``__cause__``.
    """

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="MOCK_CREATION", context=context)


class MockReferenceError(MockwireError):
    """An object passed as a mock is not a substitute created by mockwire."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="MOCK_REFERENCE", context=context)


# =============================================================================
# Dispatch Exceptions
# =============================================================================


class UnexpectedInvocationError(MockwireError, AssertionError):
    """A method was called on a mock with no handler and no default hook.

    Also an ``AssertionError`` so test runners report it as a failed test
    rather than an error in the test itself.
    """

    def __init__(self, invocation: Invocation) -> None:
        super().__init__(
            f"unexpected invocation: {invocation}",
            code="UNEXPECTED_INVOCATION",
            context={"mock": invocation.mock.name, "method": invocation.method_name},
        )
        self.invocation = invocation


class MockInvariantError(RuntimeError):
    """The dispatcher's own contract was violated (e.g. constructing twice).

    Not a MockwireError: callers must not catch and recover from it.
    """

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(f"BUG: {message}")
        self.details = details
