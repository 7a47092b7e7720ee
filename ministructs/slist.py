"""A singly linked list of strings, with the base both linked lists share."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .stack import _Listing

EMPTY_MESSAGE = "List is empty!"


@dataclass(slots=True)
class _Node:
    data: str
    next: _Node | None = None


def _missing(data: str) -> ValueError:
    return ValueError(f"{data!r} is not in the list")


class _LinkedBase(_Listing):
    """Chain of nodes reached from a head, with a tail and a running length."""

    _title = "List output"
    _empty = EMPTY_MESSAGE

    def __init__(self) -> None:
        self._head: Any = None
        self._tail: Any = None
        self._length = 0

    def _walk(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def _positions(self, data: str) -> list[int]:
        return [index for index, item in enumerate(self._walk()) if item == data]

    def _require_removable(self, removed: int, data: str) -> None:
        if not removed:
            raise _missing(data)


class SinglyLinkedList(_LinkedBase):
    """Singly linked list with insertion and removal at both ends."""

    def is_empty(self) -> bool:
        """Return True when the list holds nothing."""
        return self._head is None

    def push_back(self, data: str) -> None:
        """Append ``data`` at the end."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def push_front(self, data: str) -> None:
        """Insert ``data`` at the start."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def pop_front(self) -> str:
        """Remove and return the first item; raise IndexError when empty."""
        self._require_items()
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.data

    def pop_back(self) -> str:
        """Remove and return the last item; raise IndexError when empty."""
        self._require_items()
        if self._head.next is None:
            return self.pop_front()
        node = self._head
        while node.next.next is not None:
            node = node.next
        last = node.next
        node.next = None
        self._tail = node
        self._length -= 1
        return last.data

    def remove(self, data: str) -> None:
        """Remove every occurrence of ``data``; raise ValueError if there is none."""
        if self.is_empty():
            raise ValueError(EMPTY_MESSAGE)
        removed = 0
        while self._head is not None and self._head.data == data:
            self._head = self._head.next
            removed += 1
        node = self._head
        while node is not None and node.next is not None:
            if node.next.data == data:
                node.next = node.next.next
                removed += 1
            else:
                node = node.next
        self._tail = node
        self._length -= removed
        self._require_removable(removed, data)

    def find(self, data: str) -> list[int]:
        """Return the positions holding ``data``, in order."""
        return self._positions(data)

    def render(self) -> str:
        """Return a printable listing, or the empty message when there is nothing."""
        return self._render()

    def __iter__(self) -> Iterator[str]:
        return self._walk()

    def __len__(self) -> int:
        return self._length