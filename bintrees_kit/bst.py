"""Binary search tree built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .tree import Node


class BinarySearchTree:
    """A binary search tree of distinct integers; duplicates are ignored."""

    __slots__ = ("root",)

    def __init__(self, root: Node | None = None) -> None:
        self.root = root

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> BinarySearchTree:
        """Build a tree by inserting the values in order."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def __iter__(self) -> Iterator[int]:
        if self.root is None:
            return iter(())
        return self.root.inorder()

    def __len__(self) -> int:
        return 0 if self.root is None else self.root.size()

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> Node | None:
        """Insert a value; return the new node, or None if the value was present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value == node.value:
                return None
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right

    def search(self, value: int) -> Node | None:
        """Return the node holding the value, or None."""
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.right if node.value < value else node.left
        return None

    def remove(self, value: int) -> bool:
        """Remove the node holding the value; return False if it was absent."""
        node = self.search(value)
        if node is None:
            return False
        if node.left is None or node.right is None:
            replacement = node.left if node.left is not None else node.right
        else:
            replacement = _take_successor(node)
        self._relink(node, replacement)
        node.parent = node.left = node.right = None
        return True

    def _relink(self, node: Node, replacement: Node | None) -> None:
        parent = node.parent
        if replacement is not None:
            replacement.parent = parent
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement


def _take_successor(node: Node) -> Node:
    """Unhook the in-order successor of a node with two children and adopt its children."""
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    if successor is not node.right:
        successor.parent.left = successor.right
        if successor.right is not None:
            successor.right.parent = successor.parent
        successor.right = node.right
        node.right.parent = successor
    successor.left = node.left
    node.left.parent = successor
    return successor