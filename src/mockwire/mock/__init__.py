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
"""Mock objects: substitute generation, handler slots and invocation dispatch."""

from mockwire.mock.cleaner import CleanupTracker
from mockwire.mock.context import (
    MockContext,
    MockSettings,
    get_default_context,
    set_default_context,
    use_context,
)
from mockwire.mock.guard import ExceptionGuard
from mockwire.mock.hooks import DefaultHooks
from mockwire.mock.invocation import Invocation, InvocationResult
from mockwire.mock.mock import Mock, create, is_mock, resolve, resolve_or_passthrough
from mockwire.mock.types import Guard, HandlerKind, InvocationHandler, Tracker

__all__ = [
    "CleanupTracker",
    "DefaultHooks",
    "ExceptionGuard",
    "Guard",
    "HandlerKind",
    "Invocation",
    "InvocationHandler",
    "InvocationResult",
    "Mock",
    "MockContext",
    "MockSettings",
    "Tracker",
    "create",
    "get_default_context",
    "is_mock",
    "resolve",
    "resolve_or_passthrough",
    "set_default_context",
    "use_context",
]
