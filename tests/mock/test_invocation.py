"""Tests for Invocation and InvocationResult."""

import dataclasses
from typing import Protocol

import pytest

from mockwire.mock.context import MockContext
from mockwire.mock.invocation import Invocation, InvocationResult
from mockwire.mock.mock import Mock


class Mailer(Protocol):
    def send(self, to: str, body: str, *, urgent: bool = False) -> bool: ...


@pytest.fixture
def mailer():
    return Mock.create(Mailer, "mailer", context=MockContext())


class TestInvocation:
    def test_captures_call(self, mailer):
        mock = Mock.resolve(mailer)
        invocation = Invocation(mock, mailer, "send", Mailer.send, ["bob", "hi"], {"urgent": True})
        assert invocation.mock is mock
        assert invocation.substitute is mailer
        assert invocation.method is Mailer.send
        assert invocation.args == ("bob", "hi")
        assert dict(invocation.kwargs) == {"urgent": True}

    def test_is_immutable(self, mailer):
        invocation = Invocation(Mock.resolve(mailer), mailer, "send", args=("bob",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            invocation.method_name = "other"  # type: ignore[misc]
        with pytest.raises(TypeError):
            invocation.kwargs["urgent"] = True  # type: ignore[index]

    def test_kwargs_default_is_a_fresh_read_only_mapping(self, mailer):
        kwargs_field = next(f for f in dataclasses.fields(Invocation) if f.name == "kwargs")
        assert kwargs_field.default is dataclasses.MISSING
        invocation = Invocation(Mock.resolve(mailer), mailer, "send")
        assert dict(invocation.kwargs) == {}
        with pytest.raises(TypeError):
            invocation.kwargs["urgent"] = True  # type: ignore[index]

    def test_kwargs_snapshot_is_detached(self, mailer):
        kwargs = {"urgent": False}
        invocation = Invocation(Mock.resolve(mailer), mailer, "send", kwargs=kwargs)
        kwargs["urgent"] = True
        assert invocation.kwargs["urgent"] is False

    def test_str_renders_target_method_and_arguments(self, mailer):
        invocation = Invocation(Mock.resolve(mailer), mailer, "send", args=("bob", "hi"), kwargs={"urgent": True})
        assert str(invocation) == "mailer.send('bob', 'hi', urgent=True)"

    def test_str_without_arguments(self, mailer):
        assert str(Invocation(Mock.resolve(mailer), mailer, "flush")) == "mailer.flush()"

    def test_substitute_arguments_render_by_name(self, mailer):
        other = Mock.create(Mailer, "backup", context=MockContext())
        invocation = Invocation(Mock.resolve(mailer), mailer, "send", args=(other,))
        assert str(invocation) == "mailer.send(backup)"


class TestInvocationResult:
    def test_returning_applies_value(self):
        assert InvocationResult.returning("Hi Ada").apply() == "Hi Ada"

    def test_returning_defaults_to_none(self):
        result = InvocationResult.returning()
        assert result.apply() is None
        assert not result.raises

    def test_raising_applies_error(self):
        error = LookupError("missing")
        result = InvocationResult.raising(error)
        assert result.raises
        with pytest.raises(LookupError) as exc_info:
            result.apply()
        assert exc_info.value is error
