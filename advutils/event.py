"""Event handler that dispatches to a bounded set of registered callbacks."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from advutils.linked_list import CapacityError

_MAX_SIZE = 0xFFFF


class EventType(Enum):
    """Basic events call callbacks with no argument; extended ones pass a value."""

    BASIC = 0
    EXTENDED = 1


class EventFullError(CapacityError):
    """Raised when registering a callback on an event that is already full."""


class Event:
    """Holds up to ``size`` callbacks and calls them, in registration order.

    Using the call style that does not match the event's type raises
    ``TypeError``; registering beyond ``size`` raises ``EventFullError``.
    """

    def __init__(self, event_type: EventType, size: int) -> None:
        if not 1 <= size <= _MAX_SIZE:
            raise ValueError(f"size must be between 1 and {_MAX_SIZE}")
        self.event_type = EventType(event_type)
        self.size = size
        self._callbacks: list[Callable[..., Any]] = []

    def _add(self, callback: Callable[..., Any]) -> None:
        if not callable(callback):
            raise TypeError("callback must be callable")
        if len(self._callbacks) == self.size:
            raise EventFullError(f"event is full ({self.size} callbacks)")
        self._callbacks.append(callback)

    def register(self, callback: Callable[[], Any]) -> None:
        """Register a callback taking no argument on a basic event."""
        if self.event_type is EventType.EXTENDED:
            raise TypeError("extended events need register_ex")
        self._add(callback)

    def register_ex(self, callback: Callable[[Any], Any]) -> None:
        """Register a callback taking one value on an extended event."""
        if self.event_type is EventType.BASIC:
            raise TypeError("basic events need register")
        self._add(callback)

    def dispatch(self) -> None:
        """Call every callback of a basic event."""
        if self.event_type is EventType.EXTENDED:
            raise TypeError("extended events need dispatch_ex")
        for callback in self._callbacks:
            callback()

    def dispatch_ex(self, value: Any) -> None:
        """Call every callback of an extended event with ``value``."""
        if self.event_type is EventType.BASIC:
            raise TypeError("basic events need dispatch")
        for callback in self._callbacks:
            callback(value)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __repr__(self) -> str:
        return (
            f"Event(type={self.event_type.name}, size={self.size}, "
            f"callbacks={len(self._callbacks)})"
        )