"""Unit tests for Event: synchronous per-instance observer lists.

Tests add/remove, registration order, scoped listeners, the remover
handle, and behaviour when listeners change during a raise.
"""
from __future__ import annotations

import pytest

from timescene.events import Event


@pytest.mark.unit
class TestEventBasics:
    """Core add/raise/remove functionality."""

    def test_raise_delivers_args(self):
        event = Event()
        received = []
        event.add_event_listener(lambda *args: received.append(args))
        event.raise_event("a", 1)
        assert received == [("a", 1)]

    def test_raise_without_listeners_is_safe(self):
        Event().raise_event("nobody")

    def test_listeners_called_in_registration_order(self):
        event = Event()
        order = []
        event.add_event_listener(lambda: order.append("first"))
        event.add_event_listener(lambda: order.append("second"))
        event.add_event_listener(lambda: order.append("third"))
        event.raise_event()
        assert order == ["first", "second", "third"]

    def test_number_of_listeners(self):
        event = Event()
        assert event.number_of_listeners == 0
        event.add_event_listener(print)
        event.add_event_listener(repr)
        assert event.number_of_listeners == 2

    def test_remove_stops_delivery(self):
        event = Event()
        received = []
        listener = received.append
        event.add_event_listener(listener)
        assert event.remove_event_listener(listener) is True
        event.raise_event("after")
        assert received == []

    def test_remove_unknown_listener_returns_false(self):
        assert Event().remove_event_listener(print) is False

    def test_remover_handle(self):
        event = Event()
        received = []
        remove = event.add_event_listener(received.append)
        assert remove() is True
        assert remove() is False
        event.raise_event("x")
        assert received == []

    def test_subscribe_aliases(self):
        event = Event()
        received = []
        event.subscribe(received.append)
        event.raise_event(1)
        event.unsubscribe(received.append)
        event.raise_event(2)
        assert received == [1]

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            Event().add_event_listener("not callable")


@pytest.mark.unit
class TestEventScopes:
    """Listeners bound to a scope object."""

    def test_scoped_listener_receives_scope_first(self):
        class Sink:
            def __init__(self):
                self.items = []

        def on_event(sink, value):
            sink.items.append(value)

        sink = Sink()
        event = Event()
        event.add_event_listener(on_event, sink)
        event.raise_event(42)
        assert sink.items == [42]

    def test_remove_requires_matching_scope(self):
        event = Event()
        scope_a, scope_b = object(), object()

        def listener(scope):
            pass

        event.add_event_listener(listener, scope_a)
        assert event.remove_event_listener(listener, scope_b) is False
        assert event.remove_event_listener(listener) is False
        assert event.remove_event_listener(listener, scope_a) is True


@pytest.mark.unit
class TestEventReentrancy:
    """Listener list changes while an event is being raised."""

    def test_listener_added_during_raise_waits_for_next_raise(self):
        event = Event()
        calls = []

        def late():
            calls.append("late")

        def adder():
            calls.append("adder")
            event.add_event_listener(late)

        event.add_event_listener(adder)
        event.raise_event()
        assert calls == ["adder"]

    def test_self_removal_during_raise(self):
        event = Event()
        calls = []

        def once():
            calls.append("once")
            event.remove_event_listener(once)

        event.add_event_listener(once)
        event.add_event_listener(lambda: calls.append("other"))
        event.raise_event()
        event.raise_event()
        assert calls == ["once", "other", "other"]

    def test_listener_exception_propagates(self):
        event = Event()
        called = []

        def boom():
            raise RuntimeError("listener failed")

        event.add_event_listener(boom)
        event.add_event_listener(lambda: called.append(True))
        with pytest.raises(RuntimeError, match="listener failed"):
            event.raise_event()
        assert called == []
