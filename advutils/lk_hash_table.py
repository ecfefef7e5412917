"""Hash table with a fixed number of buckets, each a bounded list."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from advutils.hash_functions import hash_fnv1a
from advutils.linked_list import CapacityError, LinkedList

BUCKET_CAPACITY = 0xFFFF
"""Maximum number of entries a single bucket can hold."""


class LinkedHashTable:
    """String-keyed table with separate chaining.

    The table holds at most ``size`` entries. The bucket of a key is its
    FNV-1a hash masked with ``size - 1``. Missing keys raise ``KeyError``;
    adding to a full table raises ``CapacityError``.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._count = 0
        self._buckets = [LinkedList(BUCKET_CAPACITY) for _ in range(size)]

    def _bucket(self, key: str | bytes) -> LinkedList:
        return self._buckets[hash_fnv1a(key) & (self.size - 1)]

    @staticmethod
    def _position(bucket: LinkedList, key: Hashable) -> int | None:
        for position, (entry_key, _) in enumerate(bucket):
            if entry_key == key:
                return position
        return None

    def _locate(self, key: str | bytes) -> tuple[LinkedList, int]:
        if not self._count:
            raise KeyError(key)
        bucket = self._bucket(key)
        position = self._position(bucket, key) if len(bucket) else None
        if position is None:
            raise KeyError(key)
        return bucket, position

    def put(self, key: str | bytes, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if key is None or value is None:
            raise ValueError("key and value must not be None")
        if self._count == self.size:
            raise CapacityError(f"table is full ({self.size} items)")
        bucket = self._bucket(key)
        position = self._position(bucket, key)
        if position is not None:
            bucket.update((key, value), position)
            return
        bucket.push((key, value))
        self._count += 1

    def get(self, key: str | bytes) -> Any:
        """Return the value stored under ``key``."""
        bucket, position = self._locate(key)
        return bucket.peek_at(position)[1]

    def pop(self, key: str | bytes) -> Any:
        """Remove ``key`` and return its value."""
        bucket, position = self._locate(key)
        _, value = bucket.remove(position)
        self._count -= 1
        return value

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
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
        return f"LinkedHashTable(size={self.size}, items={self._count})"