"""A first-in, first-out queue of strings."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .stack import _Listing


class Queue(_Listing):
    """Queue that hands items back in the order they were pushed."""

    _title = "Queue output:"
    _empty = "Queue is empty"

    def __init__(self) -> None:
        self._queue: deque[str] = deque()

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._queue

    def push(self, data: str) -> None:
        """Add ``data`` at the back of the queue."""
        self._queue.append(data)

    def pop(self) -> str:
        """Remove and return the front item; raise IndexError when empty."""
        self._require_items()
        return self._queue.popleft()

    def render(self) -> str:
        """Return a printable listing, or the empty message when there is nothing."""
        return self._render()

    def __iter__(self) -> Iterator[str]:
        return iter(self._queue)

    def __len__(self) -> int:
        return len(self._queue)