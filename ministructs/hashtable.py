"""A fixed-size, separately chained hash table mapping strings to strings."""

from __future__ import annotations

from collections.abc import Iterator

BUCKET_COUNT = 7


class HashTable:
    """Hash table with a fixed number of chained buckets."""

    def __init__(self) -> None:
        self._buckets: list[list[list[str]]] = [[] for _ in range(BUCKET_COUNT)]

    def is_empty(self) -> bool:
        return not any(self._buckets)

    def bucket_of(self, key: str) -> int:
        """Return the bucket index for ``key``: its character code sum modulo the bucket count."""
        return sum(ord(char) for char in key) % BUCKET_COUNT

    def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value in place."""
        bucket = self._buckets[self.bucket_of(key)]
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.insert(0, [key, value])

    def get(self, key: str) -> str:
        """Return the value stored under ``key``; raise KeyError when absent."""
        for stored_key, value in self._buckets[self.bucket_of(key)]:
            if stored_key == key:
                return value
        raise KeyError(key)

    def remove(self, key: str) -> None:
        """Delete ``key``; raise KeyError when absent."""
        bucket = self._buckets[self.bucket_of(key)]
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                return
        raise KeyError(key)

    def render(self) -> str:
        """Return a printable listing of every bucket."""
        if self.is_empty():
            return "Empty"
        lines = ["Output: "]
        for number, bucket in enumerate(self._buckets):
            lines.append(f"num {number}")
            if bucket:
                pairs = "".join(f"<{key}, {value}> " for key, value in bucket)
                lines.append(f"[ {pairs}]")
            else:
                lines.append("Empty")
        return "\n".join(lines)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(entry[0] == key for entry in self._buckets[self.bucket_of(key)])

    def __iter__(self) -> Iterator[str]:
        """Iterate over keys bucket by bucket."""
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)