"""A growable array of strings with checked positional access."""

from __future__ import annotations

from collections.abc import Iterator

from .stack import _Listing

EMPTY_MESSAGE = "Massive is empty"
RANGE_MESSAGE = "Index is bigger than massive has"


class DynArray(_Listing):
    """Ordered sequence of strings that grows as items are added."""

    _title = "Massive output:"
    _empty = EMPTY_MESSAGE

    def __init__(self) -> None:
        self._items: list[str] = []

    def _check(self, index: int, limit: int) -> None:
        self._require_items()
        if not 0 <= index <= limit:
            raise IndexError(RANGE_MESSAGE)

    def _check_existing(self, index: int) -> None:
        self._check(index, len(self) - 1)

    def is_empty(self) -> bool:
        """Return True when the array holds nothing."""
        return not self._items

    def append(self, element: str) -> None:
        """Add ``element`` at the end."""
        self._items.append(element)

    def insert(self, index: int, element: str) -> None:
        """Insert ``element`` before the existing item at ``index``."""
        self._check_existing(index)
        self._items.insert(index, element)

    def pop(self, index: int) -> str:
        """Remove and return the item at ``index``.

        An index equal to the length is accepted and removes the last item.
        """
        self._check(index, len(self))
        return self._items.pop(min(index, len(self) - 1))

    def get(self, index: int) -> str:
        """Return the item at ``index``."""
        self._check_existing(index)
        return self._items[index]

    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def __setitem__(self, index: int, element: str) -> None:
        self._check_existing(index)
        self._items[index] = element

    def render(self) -> str:
        """Return a printable listing, or the empty message when there is nothing."""
        return self._render()

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)