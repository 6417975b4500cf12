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
"""CleanupTracker — purges mock handlers at the end of a test case."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mockwire.logging import get_logger

if TYPE_CHECKING:
    from mockwire.mock.mock import Mock

logger = get_logger("mockwire.cleaner")


class CleanupTracker:
    """Remembers every mock that received a handler since the last cleanup."""

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = enabled
        # Keyed by uid: registration order is kept and substitutes are never hashed.
        self._mocks: dict[int, Mock] = {}

    def register(self, mock: Mock) -> None:
        if not self._enabled:
            return
        self._mocks.setdefault(mock.uid, mock)

    def cleanup(self) -> int:
        """Clear the handlers of every registered mock and forget them.

        Returns:
            The number of mocks cleaned.
        """
        mocks = list(self._mocks.values())
        self._mocks.clear()
        for mock in mocks:
            mock.clear_all_handlers()
        if mocks:
            logger.debug("mocks_cleaned", count=len(mocks))
        return len(mocks)

    def __contains__(self, mock: object) -> bool:
        return any(registered is mock for registered in self._mocks.values())

    def __len__(self) -> int:
        return len(self._mocks)
