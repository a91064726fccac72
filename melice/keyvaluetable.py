"""Hash table with integer keys, chained buckets and load-factor growth."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

__all__ = ["KeyValueTable", "LOAD_FACTOR", "DEFAULT_BUCKET_COUNT"]

LOAD_FACTOR = 0.75
DEFAULT_BUCKET_COUNT = 16

V = TypeVar("V")


class KeyValueTable(Generic[V]):
    """Table mapping integer keys to values.

    Buckets are chosen by ``key % bucket_count``; the bucket array starts at
    16 and doubles whenever the number of entries reaches 75% of it.
    Iteration and :meth:`entries` follow bucket order, then insertion order.
    """

    def __init__(self) -> None:
        self._buckets: list[list[list]] = []
        self._count = 0

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def _grow_and_rehash(self) -> None:
        capacity = DEFAULT_BUCKET_COUNT if not self._buckets else len(self._buckets) * 2
        buckets: list[list[list]] = [[] for _ in range(capacity)]
        for bucket in self._buckets:
            for entry in bucket:
                buckets[entry[0] % capacity].append(entry)
        self._buckets = buckets

    def _find(self, key: int) -> Optional[list]:
        if not self._buckets:
            return None
        for entry in self._buckets[key % len(self._buckets)]:
            if entry[0] == key:
                return entry
        return None

    def put(self, key: int, value: V) -> None:
        self.put_and_get_old_value(key, value)

    def put_and_get_old_value(self, key: int, value: V) -> Optional[V]:
        """Store ``value``; return the replaced value, or None if the key was new."""
        if not self._buckets:
            self._grow_and_rehash()
        entry = self._find(key)
        if entry is not None:
            old = entry[1]
            entry[1] = value
            return old
        self._buckets[key % len(self._buckets)].append([key, value])
        self._count += 1
        if self._count / len(self._buckets) >= LOAD_FACTOR:
            self._grow_and_rehash()
        return None

    def get(self, key: int) -> V:
        """Return the value of ``key``; raise ``KeyError`` when it is absent."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def remove(self, key: int) -> None:
        """Remove ``key`` if present."""
        self.remove_and_get_old_value(key)

    def remove_and_get_old_value(self, key: int) -> Optional[V]:
        """Remove ``key``; return its value, or None if it was absent."""
        if not self._buckets:
            return None
        bucket = self._buckets[key % len(self._buckets)]
        for index, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[index]
                self._count -= 1
                return entry[1]
        return None

    def entries(self) -> list[tuple[int, V]]:
        """Return every ``(key, value)`` pair in bucket order."""
        return [(entry[0], entry[1]) for bucket in self._buckets for entry in bucket]

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None

    def __iter__(self) -> Iterator[int]:
        return iter([key for key, _ in self.entries()])

    def __getitem__(self, key: int) -> V:
        return self.get(key)

    def __setitem__(self, key: int, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: int) -> None:
        if key not in self:
            raise KeyError(key)
        self.remove(key)