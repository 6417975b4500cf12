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
"""Handler kinds and the collaborator protocols the dispatcher consumes."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mockwire.mock.invocation import Invocation, InvocationResult
    from mockwire.mock.mock import Mock


class HandlerKind(enum.Enum):
    """Roles a handler can play on a mock, one slot per role.

    Declaration order is selection priority: CONSTRUCTOR preempts CHECKER.
    """

    CONSTRUCTOR = "constructor"
    CHECKER = "checker"


@runtime_checkable
class InvocationHandler(Protocol):
    """Turns an intercepted call into the outcome applied to the caller."""

    def invoke(self, invocation: Invocation) -> InvocationResult: ...


@runtime_checkable
class Guard(Protocol):
    """Observes unexpected-invocation failures before they are raised."""

    def record(self, error: BaseException) -> None: ...


@runtime_checkable
class Tracker(Protocol):
    """Remembers mocks whose handlers must be purged between test cases."""

    def register(self, mock: Mock) -> None: ...
    def cleanup(self) -> int: ...
