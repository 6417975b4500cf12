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
"""Side table mapping each substitute object to the Mock that owns it."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any

from mockwire.kernel.exceptions import MockInvariantError

if TYPE_CHECKING:
    from mockwire.mock.mock import Mock

# Keyed by id(): substitutes may not be hashed without dispatching __hash__.
_owners: weakref.WeakValueDictionary[int, Mock] = weakref.WeakValueDictionary()


def bind(substitute: Any, mock: Mock) -> None:
    """Record *mock* as the single owner of *substitute*."""
    key = id(substitute)
    current = _owners.get(key)
    if current is not None and current.substitute is substitute and current is not mock:
        raise MockInvariantError("substitute already owned", substitute_owner=current.name, mock=mock.name)
    _owners[key] = mock


def lookup(obj: Any) -> Mock | None:
    """Return the Mock owning *obj*, or ``None`` when *obj* is not a substitute."""
    mock = _owners.get(id(obj))
    if mock is not None and mock.substitute is obj:
        return mock
    return None
