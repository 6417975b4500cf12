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
"""Invocation and InvocationResult — an intercepted call and its decided outcome."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from mockwire.mock.registry import lookup

if TYPE_CHECKING:
    from mockwire.mock.mock import Mock


@dataclass(frozen=True, eq=False)
class Invocation:
    """One call made against a substitute object.

    Attributes:
        mock: The Mock owning the substitute.
        substitute: The substitute object the call was made on.
        method_name: Name of the called method (e.g. ``"say_hi"``, ``"__eq__"``).
        method: The contract's attribute for that name, ``None`` when the
            contract does not define it.
        args: Positional arguments, in call order.
        kwargs: Keyword arguments (read-only).
    """

    mock: Mock
    substitute: Any
    method_name: str
    method: Any = None
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "kwargs", MappingProxyType(dict(self.kwargs)))

    def format_arguments(self) -> str:
        parts = [_safe_repr(arg) for arg in self.args]
        parts.extend(f"{key}={_safe_repr(value)}" for key, value in self.kwargs.items())
        return ", ".join(parts)

    def __str__(self) -> str:
        return f"{self.mock.name}.{self.method_name}({self.format_arguments()})"


def _safe_repr(value: Any) -> str:
    # repr() of a substitute would be dispatched into its own handlers.
    owner = lookup(value)
    if owner is not None:
        return owner.name
    return repr(value)


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of an invocation: a value to return or an error to raise.

    Build one with :meth:`returning` or :meth:`raising`.
    """

    value: Any = None
    error: BaseException | None = None

    @classmethod
    def returning(cls, value: Any = None) -> InvocationResult:
        return cls(value=value)

    @classmethod
    def raising(cls, error: BaseException) -> InvocationResult:
        return cls(error=error)

    @property
    def raises(self) -> bool:
        return self.error is not None

    def apply(self) -> Any:
        """Return the value, or raise the error."""
        if self.error is not None:
            raise self.error
        return self.value
