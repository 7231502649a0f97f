"""Event: synchronous per-instance observer list.

Each data source owns its own Event objects, so there are no ambient or
global channels. Listeners run in registration order on the raising
thread, before raise_event() returns.
"""

from __future__ import annotations

import threading
from typing import Any, Callable


class Event:
    """Ordered list of (listener, scope) registrations."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._listeners: list[tuple[Callable[..., Any], Any]] = []

    @property
    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def add_event_listener(
        self, listener: Callable[..., Any], scope: Any = None,
    ) -> Callable[[], bool]:
        """Register a listener, optionally bound to ``scope``.

        When a scope is given the listener is invoked as a method of it:
        ``listener(scope, *args)``.

        Returns:
            A zero-argument callable that removes this registration.
        """
        if not callable(listener):
            raise TypeError("listener must be callable")
        with self._lock:
            self._listeners.append((listener, scope))
        return lambda: self.remove_event_listener(listener, scope)

    def remove_event_listener(
        self, listener: Callable[..., Any], scope: Any = None,
    ) -> bool:
        """Remove the first matching registration.

        Returns:
            True if a registration was removed, False if none matched.
        """
        with self._lock:
            for idx, (fn, sc) in enumerate(self._listeners):
                if fn == listener and sc is scope:
                    del self._listeners[idx]
                    return True
        return False

    subscribe = add_event_listener
    unsubscribe = remove_event_listener

    def raise_event(self, *args: Any) -> None:
        """Call every registered listener with ``args``.

        Listeners added or removed while raising take effect on the next
        raise. Exceptions from a listener propagate to the raiser.
        """
        with self._lock:
            snapshot = list(self._listeners)
        for listener, scope in snapshot:
            if scope is None:
                listener(*args)
            else:
                listener(scope, *args)
