"""Open-addressing hash table with linear probing and optional resizing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from advutils.hash_functions import hash_fnv1a
from advutils.linked_list import CapacityError

MIN_SIZE = 5
"""Smallest size a resizable table shrinks to."""

MAX_SIZE = 0xFFFFFFFF
"""Largest size a resizable table grows to."""

MIN_SATURATION = 0.2
"""Fill ratio at or below which a resizable table shrinks."""

MAX_SATURATION = 0.7
"""Fill ratio at or above which a resizable table grows."""


@dataclass(slots=True)
class _Entry:
    key: str | bytes
    value: Any


class LinearProbingHashTable:
    """String-keyed table storing entries in a single probed array.

    A resizable table doubles when it would reach 70% fill and halves when
    it drops to 20%. Missing keys raise ``KeyError``; adding to a full
    table raises ``CapacityError``.
    """

    def __init__(self, size: int, resizable: bool = True) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.resizable = resizable
        self._slots: list[_Entry | None] = [None] * size
        self._count = 0

    @property
    def size(self) -> int:
        """Current number of slots."""
        return len(self._slots)

    def _home(self, key: str | bytes) -> int:
        return hash_fnv1a(key) & (len(self._slots) - 1)

    def _next(self, index: int) -> int:
        index += 1
        return 0 if index >= len(self._slots) else index

    def _place(self, entry: _Entry) -> None:
        index = self._home(entry.key)
        while self._slots[index] is not None:
            index = self._next(index)
        self._slots[index] = entry

    def _update(self, key: str | bytes, value: Any) -> bool:
        index = self._home(key)
        for _ in range(len(self._slots)):
            entry = self._slots[index]
            if entry is None:
                break
            if entry.key == key:
                entry.value = value
                return True
            index = self._next(index)
        return False

    def _locate(self, key: str | bytes) -> int:
        if not self._count:
            raise KeyError(key)
        index = self._home(key)
        for _ in range(self._count):
            entry = self._slots[index]
            if entry is None:
                break
            if entry.key == key:
                return index
            index = self._next(index)
        raise KeyError(key)

    def _close_gap(self, index: int) -> None:
        """Re-seat the entries that follow a freed slot in its cluster."""
        index = self._next(index)
        for _ in range(self._count):
            entry = self._slots[index]
            if entry is None:
                break
            self._slots[index] = None
            self._place(entry)
            index = self._next(index)

    def _resize(self, grow: bool) -> bool:
        size = len(self._slots)
        if grow:
            if size >= MAX_SIZE:
                return False
            new_size = MAX_SIZE if size >= (MAX_SIZE >> 1) else size * 2
        else:
            if size <= MIN_SIZE:
                return False
            new_size = size >> 1 if size >= MIN_SIZE * 2 else MIN_SIZE
        old_slots = self._slots
        self._slots = [None] * new_size
        for entry in old_slots:
            if entry is not None:
                self._place(entry)
        return True

    def put(self, key: str | bytes, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if key is None or value is None:
            raise ValueError("key and value must not be None")
        if self._update(key, value):
            return
        if self.resizable and self._count + 1 >= len(self._slots) * MAX_SATURATION:
            self._resize(grow=True)
        if self._count >= len(self._slots):
            raise CapacityError(f"table is full ({len(self._slots)} items)")
        self._place(_Entry(key, value))
        self._count += 1

    def get(self, key: str | bytes) -> Any:
        """Return the value stored under ``key``."""
        entry = self._slots[self._locate(key)]
        assert entry is not None
        return entry.value

    def pop(self, key: str | bytes) -> Any:
        """Remove ``key`` and return its value."""
        index = self._locate(key)
        entry = self._slots[index]
        assert entry is not None
        self._slots[index] = None
        self._count -= 1
        shrink = self.resizable and self._count <= len(self._slots) * MIN_SATURATION
        if not (shrink and self._resize(grow=False)):
            self._close_gap(index)
        return entry.value

    def clear(self) -> None:
        """Remove every entry, keeping the current size."""
        self._slots = [None] * len(self._slots)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes, bytearray)):
            return False
        try:
            self._locate(key)
        except KeyError:
            return False
        return True

    def __repr__(self) -> str:
        return (
            f"LinearProbingHashTable(size={self.size}, items={self._count}, "
            f"resizable={self.resizable})"
        )