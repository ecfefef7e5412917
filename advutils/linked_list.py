"""Bounded list with queue-like and positional operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class CapacityError(Exception):
    """Raised when adding to a list that already holds its capacity."""


class LinkedList:
    """A list holding at most ``capacity`` items.

    Empty-list and out-of-range accesses raise ``IndexError``; adding to a
    full list raises ``CapacityError``.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def _ensure_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise CapacityError(f"list is full ({self.capacity} items)")

    def _ensure_not_empty(self) -> None:
        if not self._items:
            raise IndexError("list is empty")

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= len(self._items):
            raise IndexError(f"position {position} out of range")

    def push(self, value: Any) -> None:
        """Append ``value`` at the back."""
        self._ensure_room()
        self._items.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._ensure_room()
        self._items.appendleft(value)

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        self._ensure_room()
        if position < 0 or position > len(self._items):
            raise IndexError(f"position {position} out of range")
        self._items.insert(position, value)

    def update(self, value: Any, position: int) -> None:
        """Replace the item at ``position`` with ``value``."""
        self._check_position(position)
        self._items[position] = value

    def pop(self) -> Any:
        """Remove and return the front item."""
        self._ensure_not_empty()
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the back item."""
        self._ensure_not_empty()
        return self._items.pop()

    def remove(self, position: int) -> Any:
        """Remove and return the item at ``position``."""
        self._ensure_not_empty()
        self._check_position(position)
        value = self._items[position]
        del self._items[position]
        return value

    def peek(self) -> Any:
        """Return the front item without removing it."""
        self._ensure_not_empty()
        return self._items[0]

    def peek_back(self) -> Any:
        """Return the back item without removing it."""
        self._ensure_not_empty()
        return self._items[-1]

    def peek_at(self, position: int) -> Any:
        """Return the item at ``position`` without removing it."""
        self._ensure_not_empty()
        self._check_position(position)
        return self._items[position]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList(capacity={self.capacity}, items={list(self._items)!r})"