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
"""Default hooks — built-in answers for the universal object methods."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mockwire.mock.invocation import Invocation, InvocationResult

HookFn = Callable[[Invocation], Any]


def _equals(invocation: Invocation) -> bool:
    (other,) = invocation.args
    return invocation.substitute is other


def _not_equals(invocation: Invocation) -> bool:
    return not _equals(invocation)


def _hash(invocation: Invocation) -> int:
    return hash(("mockwire.Mock", invocation.mock.uid))


def _display_name(invocation: Invocation) -> str:
    return invocation.mock.name


class DefaultHooks:
    """Table of fallback behaviors used when a mock has no handler.

    Covers identity equality, hashing and the string forms, so a bare mock can
    still be compared, stored in sets and printed.
    """

    def __init__(self) -> None:
        self._hooks: dict[str, HookFn] = {
            "__eq__": _equals,
            "__ne__": _not_equals,
            "__hash__": _hash,
            "__str__": _display_name,
            "__repr__": _display_name,
        }

    @property
    def method_names(self) -> frozenset[str]:
        return frozenset(self._hooks)

    def try_invocation(self, invocation: Invocation) -> InvocationResult | None:
        """Answer *invocation* with a default, or ``None`` when no hook applies.

        A hook only applies to calls with the arity of the object method it
        replaces; anything else falls through to the caller.
        """
        hook = self._hooks.get(invocation.method_name)
        if hook is None or invocation.kwargs:
            return None
        expected_args = 1 if invocation.method_name in ("__eq__", "__ne__") else 0
        if len(invocation.args) != expected_args:
            return None
        return InvocationResult.returning(hook(invocation))
