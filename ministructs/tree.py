"""A binary tree of strings that fills each node's two slots before descending."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

INDENT = "   " * 4


@dataclass(slots=True)
class _Node:
    data: str
    left: _Node | None = None
    right: _Node | None = None


class Tree:
    """Binary tree of strings.

    A new item takes the first free child slot (left, then right) of the node
    being visited; only when both are taken does it descend, to the right when
    the item is not less than the node's data and to the left otherwise.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None

    def is_empty(self) -> bool:
        return self._root is None

    def insert(self, data: str) -> None:
        """Add ``data`` to the tree."""
        new_node = _Node(data)
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if node.left is None:
                node.left = new_node
                return
            if node.right is None:
                node.right = new_node
                return
            node = node.right if data >= node.data else node.left

    def contains(self, data: str) -> bool:
        """Return whether ``data`` can be reached along its search path."""
        node = self._root
        if node is None:
            return False
        if node.data == data:
            return True
        while node is not None:
            if node.left is None and node.right is None:
                return False
            if node.left is not None and node.left.data == data:
                return True
            if node.right is not None and node.right.data == data:
                return True
            node = node.right if data > node.data else node.left
        return False

    def is_full(self) -> bool:
        """Return whether every node has either no children or two.

        An empty tree is not considered full.
        """
        if self._root is None:
            return False
        return self._full(self._root)

    @classmethod
    def _full(cls, node: _Node | None) -> bool:
        if node is None:
            return True
        if node.left is None and node.right is None:
            return True
        if node.left is not None and node.right is not None:
            return cls._full(node.left) and cls._full(node.right)
        return False

    def render(self) -> str:
        """Return the tree sideways: right subtree above, left subtree below."""
        return "\n".join(self._lines(self._root, 0))

    @classmethod
    def _lines(cls, node: _Node | None, level: int) -> Iterator[str]:
        if node is None:
            return
        yield from cls._lines(node.right, level + 1)
        yield INDENT * level + node.data
        yield from cls._lines(node.left, level + 1)