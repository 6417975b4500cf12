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
"""MockContext — the guard and cleanup tracker injected into every mock."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from mockwire.core.config import Config, config_properties
from mockwire.mock.cleaner import CleanupTracker
from mockwire.mock.guard import ExceptionGuard
from mockwire.mock.types import Guard, Tracker


@config_properties(prefix="mockwire.mock")
@dataclass
class MockSettings:
    """Settings bound from ``mockwire.mock``.

    Attributes:
        guard_enabled: When false the exception guard never captures errors.
        track_cleanup: When false mocks are not registered for end-of-test
            handler cleanup.
    """

    guard_enabled: bool = True
    track_cleanup: bool = True


@dataclass
class MockContext:
    """Collaborators shared by the mocks created against it.

    Mocks keep the context they were created with; swapping the default
    context only affects mocks created afterwards.
    """

    guard: Guard = field(default_factory=ExceptionGuard)
    tracker: Tracker = field(default_factory=CleanupTracker)

    @classmethod
    def from_config(cls, config: Config) -> MockContext:
        settings = config.bind(MockSettings)
        return cls(
            guard=ExceptionGuard(enabled=settings.guard_enabled),
            tracker=CleanupTracker(enabled=settings.track_cleanup),
        )

    def reset(self) -> int:
        """End-of-test reset: purge tracked handlers and clear the guard.

        Returns:
            The number of mocks whose handlers were purged.
        """
        cleaned = self.tracker.cleanup()
        if isinstance(self.guard, ExceptionGuard):
            self.guard.reset()
        return cleaned


_default_context = MockContext()


def get_default_context() -> MockContext:
    return _default_context


def set_default_context(context: MockContext) -> MockContext:
    """Install *context* as the default and return the one it replaces."""
    global _default_context
    previous = _default_context
    _default_context = context
    return previous


@contextmanager
def use_context(context: MockContext) -> Iterator[MockContext]:
    """Make *context* the default for the duration of the block."""
    previous = set_default_context(context)
    try:
        yield context
    finally:
        set_default_context(previous)
