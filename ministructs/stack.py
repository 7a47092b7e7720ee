"""A last-in, first-out stack of strings, with the listing helpers the containers share."""

from __future__ import annotations

from collections.abc import Iterator


class _Listing:
    """Helpers for sized, iterable collections of strings that describe themselves as text."""

    _title = ""
    _empty = ""
    _trailer = ""

    def _require_items(self) -> None:
        if not len(self):  # type: ignore[arg-type]
            raise IndexError(self._empty)

    def _render(self) -> str:
        if not len(self):  # type: ignore[arg-type]
            return self._empty
        return "\n".join([self._title, *self]) + self._trailer  # type: ignore[misc]


class Stack(_Listing):
    """Stack whose most recently pushed item is on top."""

    _title = "Stack output:"
    _empty = "Stack is empty"
    _trailer = "\n"

    def __init__(self) -> None:
        self._items: list[str] = []

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items

    def push(self, data: str) -> None:
        """Put ``data`` on top of the stack."""
        self._items.append(data)

    def pop(self) -> str:
        """Remove and return the top item; raise IndexError when empty."""
        self._require_items()
        return self._items.pop()

    def render(self) -> str:
        """Return a printable listing, or the empty message when there is nothing."""
        return self._render()

    def __iter__(self) -> Iterator[str]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)