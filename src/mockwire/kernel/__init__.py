"""mockwire kernel — exception hierarchy with zero external dependencies."""

from mockwire.kernel.exceptions import (
    MockCreationError,
    MockInvariantError,
    MockReferenceError,
    MockwireError,
    UnexpectedInvocationError,
)

__all__ = [
    # Base
    "MockwireError",
    # Lifecycle
    "MockCreationError",
    "MockReferenceError",
    # Dispatch
    "UnexpectedInvocationError",
    # Bugs
    "MockInvariantError",
]
