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
"""mockwire — interface mocks whose every call is routed through pluggable handlers."""

from mockwire.kernel.exceptions import (
    MockCreationError,
    MockInvariantError,
    MockReferenceError,
    MockwireError,
    UnexpectedInvocationError,
)
from mockwire.mock import (
    ExceptionGuard,
    HandlerKind,
    Invocation,
    InvocationHandler,
    InvocationResult,
    Mock,
    MockContext,
    create,
    is_mock,
    resolve,
    resolve_or_passthrough,
)

__version__ = "0.1.0"

__all__ = [
    "ExceptionGuard",
    "HandlerKind",
    "Invocation",
    "InvocationHandler",
    "InvocationResult",
    "Mock",
    "MockContext",
    "MockCreationError",
    "MockInvariantError",
    "MockReferenceError",
    "MockwireError",
    "UnexpectedInvocationError",
    "create",
    "is_mock",
    "resolve",
    "resolve_or_passthrough",
]
