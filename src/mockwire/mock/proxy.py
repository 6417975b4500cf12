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
"""Substitute generation — a per-mock subclass of the contract whose methods forward to the dispatcher."""

from __future__ import annotations

import abc
import functools
import inspect
import types
import typing
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mockwire.mock.mock import Mock

#: Universal object methods every substitute intercepts, defined or not.
OBJECT_METHODS: tuple[str, ...] = ("__eq__", "__ne__", "__hash__", "__str__", "__repr__")

# Methods the interpreter needs to build, inspect and manage the substitute.
_RESERVED = frozenset(
    {
        "__init__",
        "__new__",
        "__getattribute__",
        "__getattr__",
        "__setattr__",
        "__delattr__",
        "__init_subclass__",
        "__subclasshook__",
        "__class_getitem__",
        "__del__",
        "__class__",
        "__dir__",
        "__reduce__",
        "__reduce_ex__",
        "__getstate__",
        "__sizeof__",
        "__format__",
    }
)

_SKIPPED_BASES: tuple[type, ...] = (object, abc.ABC, typing.Protocol, typing.Generic)  # type: ignore[arg-type]


def _is_interceptable(name: str, attr: Any) -> bool:
    if name in _RESERVED:
        return False
    is_dunder = name.startswith("__") and name.endswith("__")
    if name.startswith("_") and not is_dunder:
        return False
    if isinstance(attr, type):
        return False
    if isinstance(attr, (staticmethod, classmethod, property)):
        return True
    return callable(attr)


def intercepted_methods(contract: type) -> dict[str, Any]:
    """Map every method name a substitute of *contract* intercepts to the contract's attribute.

    Attributes come from the most derived class defining them; object
    methods the contract does not define map to ``None``. Abstract members
    are always included, private ones too, so ABC contracts instantiate.
    """
    methods: dict[str, Any] = {}
    for klass in reversed(contract.__mro__):
        if klass in _SKIPPED_BASES:
            continue
        for name, attr in vars(klass).items():
            if _is_interceptable(name, attr):
                methods[name] = attr
    for name in getattr(contract, "__abstractmethods__", ()):
        if name not in methods:
            methods[name] = _defining_attribute(contract, name)
    for name in OBJECT_METHODS:
        methods.setdefault(name, None)
    return methods


def _defining_attribute(contract: type, name: str) -> Any:
    for klass in contract.__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return None


def _underlying_function(attr: Any) -> Any:
    if isinstance(attr, (staticmethod, classmethod)):
        return attr.__func__
    if isinstance(attr, property):
        return attr.fget
    return attr


def _make_forwarder(mock: Mock, name: str, attr: Any, owner_qualname: str) -> Any:
    method = _underlying_function(attr)

    def forward(self: Any, *args: Any, **kwargs: Any) -> Any:
        return mock.invoke(self, name, args, kwargs, method=method)

    if inspect.isfunction(method):
        # __dict__ is not merged: it would carry __isabstractmethod__ over.
        functools.update_wrapper(forward, method, updated=())
    forward.__name__ = name
    forward.__qualname__ = f"{owner_qualname}.{name}"

    if isinstance(attr, property):
        return property(forward, doc=attr.__doc__)
    return forward


def new_substitute(contract: Any, mock: Mock) -> Any:
    """Build the substitute class for *contract* and return an instance of it.

    The contract's ``__init__`` is never run.

    Raises:
        TypeError: *contract* is not a class, cannot be subclassed, or its
            instances cannot be created without running its constructor.
    """
    if not isinstance(contract, type):
        raise TypeError(f"mock contract must be a class, got {type(contract).__name__}: {contract!r}")

    class_name = f"{contract.__name__}$Mock"
    namespace = {
        name: _make_forwarder(mock, name, attr, class_name)
        for name, attr in intercepted_methods(contract).items()
    }
    namespace["__module__"] = contract.__module__
    namespace["__qualname__"] = class_name

    substitute_cls = types.new_class(class_name, (contract,), {}, lambda ns: ns.update(namespace))
    return object.__new__(substitute_cls)
