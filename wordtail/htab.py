"""A separately chained hash table that counts occurrences of string keys."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

_HASH_MULTIPLIER = 65599
_HASH_MASK = 0xFFFFFFFF


def hash_function(key: str | bytes) -> int:
    """Return the 32-bit sdbm-style hash of *key* (strings are hashed as UTF-8)."""
    data = key.encode("utf-8", "surrogateescape") if isinstance(key, str) else key
    h = 0
    for byte in data:
        h = (_HASH_MULTIPLIER * h + byte) & _HASH_MASK
    return h


@dataclass
class Pair:
    """A key together with the count associated with it."""

    key: str
    value: int = 0


class HashTable:
    """Hash table mapping string keys to counters, with a fixed number of buckets."""

    def __init__(self, n: int) -> None:
        """Create a table sized for about *n* entries, with a 20% reserve."""
        if n < 0:
            raise ValueError("expected size must not be negative")
        buckets = (n * 12 + 9) // 10
        if buckets == 0:
            raise ValueError("hash table needs at least one bucket")
        self._buckets: list[list[Pair]] = [[] for _ in range(buckets)]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def bucket_count(self) -> int:
        """Return the number of buckets."""
        return len(self._buckets)

    def _bucket(self, key: str) -> list[Pair]:
        return self._buckets[hash_function(key) % len(self._buckets)]

    def find(self, key: str) -> Pair | None:
        """Return the pair stored under *key*, or None."""
        for pair in self._bucket(key):
            if pair.key == key:
                return pair
        return None

    def lookup_add(self, key: str) -> Pair:
        """Increment the count of *key*, adding it with count 1 if absent."""
        bucket = self._bucket(key)
        for pair in bucket:
            if pair.key == key:
                pair.value += 1
                return pair
        pair = Pair(key, 1)
        bucket.insert(0, pair)
        self._size += 1
        return pair

    def erase(self, key: str) -> bool:
        """Remove *key*; return whether it was present."""
        bucket = self._bucket(key)
        for position, pair in enumerate(bucket):
            if pair.key == key:
                del bucket[position]
                self._size -= 1
                return True
        return False

    def for_each(self, func: Callable[[Pair], object]) -> None:
        """Call *func* on every pair, bucket by bucket."""
        for pair in self:
            func(pair)

    def __iter__(self) -> Iterator[Pair]:
        for bucket in self._buckets:
            yield from bucket

    def clear(self) -> None:
        """Remove all entries, keeping the bucket count."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0