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
"""ExceptionGuard — lets a test capture a failure raised on a mock for later assertion."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from mockwire.logging import get_logger

logger = get_logger("mockwire.guard")


class ExceptionGuard:
    """Captures errors reported while armed.

    The dispatcher calls :meth:`record` right before it raises an
    unexpected-invocation failure. Recording is observational: the error
    is raised regardless, and an unarmed guard ignores it.

    Usage::

        guard = ExceptionGuard()
        with guard.guarding(), pytest.raises(UnexpectedInvocationError):
            service.run(mock_repo)
        assert guard.recorded
    """

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = enabled
        self._depth = 0
        self._recorded: list[BaseException] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def armed(self) -> bool:
        return self._enabled and self._depth > 0

    @property
    def recorded(self) -> list[BaseException]:
        """Errors captured so far, oldest first."""
        return list(self._recorded)

    @property
    def last(self) -> BaseException | None:
        return self._recorded[-1] if self._recorded else None

    def record(self, error: BaseException) -> None:
        if not self.armed:
            return
        logger.debug("guard_recorded", error_type=type(error).__name__, error=str(error))
        self._recorded.append(error)

    @contextmanager
    def guarding(self) -> Iterator[ExceptionGuard]:
        """Arm the guard for the duration of the block; nesting is allowed."""
        self._depth += 1
        try:
            yield self
        finally:
            self._depth = max(self._depth - 1, 0)

    def reset(self) -> None:
        """Forget every captured error and disarm."""
        self._recorded.clear()
        self._depth = 0
