# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Mock — owns a substitute object and dispatches every call made against it.

Each intercepted call becomes an :class:`Invocation`, which is routed to the
CONSTRUCTOR handler if one is set, otherwise to the CHECKER handler,
otherwise to the default hooks. A call nothing can answer is recorded with
the context's exception guard and raised as
:class:`UnexpectedInvocationError`.
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from typing import Any

from mockwire.kernel.exceptions import (
    MockCreationError,
    MockInvariantError,
    MockReferenceError,
    UnexpectedInvocationError,
)
from mockwire.logging import get_logger
from mockwire.mock import registry
from mockwire.mock.context import MockContext, get_default_context
from mockwire.mock.hooks import DefaultHooks
from mockwire.mock.invocation import Invocation, InvocationResult
from mockwire.mock.proxy import new_substitute
from mockwire.mock.types import HandlerKind, InvocationHandler

logger = get_logger("mockwire.mock")

# Process-wide; never reset so uids are never reused.
_uid_counter = itertools.count()

_default_hooks = DefaultHooks()


class Mock:
    """Dispatcher behind one substitute object.

    Not created directly: use :meth:`create`, which returns the substitute,
    and :meth:`resolve` to get back to its Mock.
    """

    def __init__(self, name: str | None, contract: type, context: MockContext) -> None:
        self._uid: int = next(_uid_counter)
        self._contract = contract
        self._context = context
        self._handlers: dict[HandlerKind, InvocationHandler | None] = dict.fromkeys(HandlerKind)
        self._name = name if name is not None else self._default_name()
        self._substitute = new_substitute(contract, self)
        registry.bind(self._substitute, self)

        logger.debug("mock_created", mock=self._name, uid=self._uid, contract=contract.__qualname__)

    # ------------------------------------------------------------------
    # Factory and resolution
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, contract: Any, name: str | None = None, *, context: MockContext | None = None) -> Any:
        """Create a mock of *contract* and return its substitute object.

        Args:
            contract: The class, protocol or ABC the substitute must satisfy.
            name: Display name; defaults to ``Mock(<contract>)$<uid>``.
            context: Guard and cleanup tracker for the mock; the default
                context when omitted.

        Raises:
            MockCreationError: No substitute can be generated for *contract*.
        """
        try:
            mock = cls(name, contract, context if context is not None else get_default_context())
        except Exception as exc:
            contract_name = getattr(contract, "__qualname__", repr(contract))
            raise MockCreationError(
                f"cannot create mock of {contract_name}: {exc}",
                context={"contract": contract_name, "name": name},
            ) from exc
        return mock.substitute

    @staticmethod
    def resolve(obj: Any) -> Mock:
        """Return the Mock owning substitute *obj*.

        Raises:
            MockReferenceError: *obj* is not a substitute created by mockwire.
        """
        mock = registry.lookup(obj)
        if mock is None:
            raise MockReferenceError(
                "referencing a non-mock object",
                context={"type": type(obj).__qualname__},
            )
        return mock

    @staticmethod
    def resolve_or_passthrough(obj: Any) -> Any:
        """Return the Mock owning *obj*, or *obj* itself when it is not a substitute."""
        mock = registry.lookup(obj)
        return obj if mock is None else mock

    def _default_name(self) -> str:
        return f"Mock({getattr(self._contract, '__name__', repr(self._contract))})${self._uid}"

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def uid(self) -> int:
        return self._uid

    @property
    def contract(self) -> type:
        return self._contract

    @property
    def substitute(self) -> Any:
        return self._substitute

    @property
    def name(self) -> str:
        return self._name

    @property
    def context(self) -> MockContext:
        return self._context

    @property
    def default_hooks(self) -> DefaultHooks:
        return _default_hooks

    # ------------------------------------------------------------------
    # Handler slots
    # ------------------------------------------------------------------

    def set_handler(self, kind: HandlerKind, handler: InvocationHandler) -> None:
        """Install *handler* in the *kind* slot, replacing any CHECKER already there.

        Raises:
            MockInvariantError: A CONSTRUCTOR handler is already installed.
        """
        logger.debug("handler_set", mock=self._name, kind=kind.name, handler=type(handler).__name__)

        if kind is HandlerKind.CONSTRUCTOR and self._handlers[kind] is not None:
            raise MockInvariantError("constructing twice!", mock=self._name)

        self._handlers[kind] = handler
        self._context.tracker.register(self)

    def unset_handler(self, kind: HandlerKind) -> None:
        logger.debug("handler_unset", mock=self._name, kind=kind.name)
        self._handlers[kind] = None

    def clear_all_handlers(self) -> None:
        logger.debug("handlers_cleared", mock=self._name)
        for kind in self._handlers:
            self._handlers[kind] = None

    def get_handler(self, kind: HandlerKind) -> InvocationHandler | None:
        return self._handlers[kind]

    def select_handler(self) -> InvocationHandler | None:
        """CONSTRUCTOR if set, else CHECKER if set, else ``None``."""
        constructor = self._handlers[HandlerKind.CONSTRUCTOR]
        if constructor is not None:
            logger.debug("handler_selected", mock=self._name, kind="CONSTRUCTOR")
            return constructor
        checker = self._handlers[HandlerKind.CHECKER]
        if checker is not None:
            logger.debug("handler_selected", mock=self._name, kind="CHECKER")
        return checker

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def invoke(
        self,
        substitute: Any,
        method_name: str,
        args: tuple[Any, ...] = (),
        kwargs: Mapping[str, Any] | None = None,
        *,
        method: Any = None,
    ) -> Any:
        """Dispatch one intercepted call and return (or raise) its outcome.

        *method* is the contract's attribute for *method_name*, when it has one.
        """
        invocation = Invocation(
            mock=self,
            substitute=substitute,
            method_name=method_name,
            method=method,
            args=args,
            kwargs=kwargs or {},
        )
        handler = self.select_handler()
        if handler is not None:
            return handler.invoke(invocation).apply()

        logger.debug("no_handler", mock=self._name, method=method_name)
        return self._try_default_invocation(invocation).apply()

    def _try_default_invocation(self, invocation: Invocation) -> InvocationResult:
        result = _default_hooks.try_invocation(invocation)
        if result is None:
            # Recorded first: an armed guard may be capturing this failure.
            error = UnexpectedInvocationError(invocation)
            logger.debug("unexpected_invocation", mock=self._name, invocation=str(invocation))
            self._context.guard.record(error)
            raise error

        logger.debug("default_hook_used", mock=self._name, method=invocation.method_name)
        return result

    def __repr__(self) -> str:
        contract = getattr(self._contract, "__qualname__", repr(self._contract))
        return f"<Mock {self._name} uid={self._uid} contract={contract}>"

    def __str__(self) -> str:
        return self._name


create = Mock.create
resolve = Mock.resolve
resolve_or_passthrough = Mock.resolve_or_passthrough


def is_mock(obj: Any) -> bool:
    """True when *obj* is a substitute created by mockwire."""
    return registry.lookup(obj) is not None
