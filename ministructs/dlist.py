"""A doubly linked list of strings."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .slist import EMPTY_MESSAGE, _LinkedBase


@dataclass(slots=True)
class _Node:
    data: str
    next: _Node | None = None
    prev: _Node | None = None


class DoublyLinkedList(_LinkedBase):
    """Doubly linked list with constant-time work at both ends."""

    def _link(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node
        else:
            node.prev.next = node
        if node.next is None:
            self._tail = node
        else:
            node.next.prev = node
        self._length += 1

    def _unlink(self, node: _Node) -> str:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._length -= 1
        return node.data

    def is_empty(self) -> bool:
        """Return True when the list holds nothing."""
        return self._head is None

    def push_back(self, data: str) -> None:
        """Append ``data`` at the end."""
        self._link(_Node(data, prev=self._tail))

    def push_front(self, data: str) -> None:
        """Insert ``data`` at the start."""
        self._link(_Node(data, next=self._head))

    def pop_front(self) -> str:
        """Remove and return the first item; raise IndexError when empty."""
        self._require_items()
        return self._unlink(self._head)

    def pop_back(self) -> str:
        """Remove and return the last item; raise IndexError when empty."""
        self._require_items()
        return self._unlink(self._tail)

    def remove(self, data: str) -> None:
        """Remove every occurrence of ``data``; raise ValueError if there is none."""
        if self.is_empty():
            raise ValueError(EMPTY_MESSAGE)
        removed = 0
        node = self._head
        while node is not None:
            following = node.next
            if node.data == data:
                self._unlink(node)
                removed += 1
            node = following
        self._require_removable(removed, data)

    def find(self, data: str) -> list[int]:
        """Return the positions holding ``data``, in order."""
        return self._positions(data)

    def render(self) -> str:
        """Return a printable listing, or the empty message when there is nothing."""
        return self._render()

    def __iter__(self) -> Iterator[str]:
        return self._walk()

    def __reversed__(self) -> Iterator[str]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._length