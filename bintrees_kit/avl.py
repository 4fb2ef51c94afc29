"""AVL trees: self-balancing binary search trees built from linked nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .bst import BinarySearchTree
from .properties import rotate_left, rotate_right
from .tree import Node


def _within_avl_rules(node: Node | None, low: int | None, high: int | None) -> bool:
    if node is None:
        return True
    if (low is not None and node.value <= low) or (
        high is not None and node.value >= high
    ):
        return False
    if abs(node.balance()) > 1:
        return False
    return _within_avl_rules(node.left, low, node.value) and _within_avl_rules(
        node.right, node.value, high
    )


def is_avl(tree: Node | None) -> bool:
    """Return True if the tree is a search tree with distinct values and balanced nodes."""
    if tree is None:
        return False
    return _within_avl_rules(tree, None, None)


class AVLTree(BinarySearchTree):
    """A binary search tree kept height-balanced after every insertion and removal."""

    __slots__ = ()

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> AVLTree:
        """Build a tree by inserting the values in order; duplicates are ignored."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    @classmethod
    def from_sorted(cls, values: Sequence[int]) -> AVLTree:
        """Build a balanced tree directly from an ascending sequence of distinct values."""
        tree = cls()
        if not values:
            return tree
        middle = (len(values) - 1) // 2
        tree.root = Node(values[middle])

        def attach(parent: Node, low: int, high: int) -> None:
            if high - low <= 1:
                return
            mid = (high - low) // 2 + low
            node = Node(values[mid], parent)
            if node.value > parent.value:
                parent.right = node
            elif node.value < parent.value:
                parent.left = node
            attach(node, low, mid)
            attach(node, mid, high)

        attach(tree.root, -1, middle)
        attach(tree.root, middle, len(values))
        return tree

    def insert(self, value: int) -> Node | None:
        """Insert a value and rebalance; return the new node, or None if present."""
        node = super().insert(value)
        if node is not None:
            self._rebalance_upwards(node.parent)
        return node

    def remove(self, value: int) -> bool:
        """Remove a value and rebalance; return False if it was absent."""
        node = self.search(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            start = successor if successor is node.right else successor.parent
        else:
            start = node.parent
        super().remove(value)
        self._rebalance_upwards(start)
        return True

    def _rebalance_upwards(self, node: Node | None) -> None:
        while node is not None:
            node = self._rebalance(node).parent

    def _rebalance(self, node: Node) -> Node:
        factor = node.balance()
        if factor > 1:
            if node.left.balance() < 0:
                self._rotate(node.left, rotate_left)
            return self._rotate(node, rotate_right)
        if factor < -1:
            if node.right.balance() > 0:
                self._rotate(node.right, rotate_right)
            return self._rotate(node, rotate_left)
        return node

    def _rotate(self, node: Node, rotation: Callable[[Node], Node | None]) -> Node:
        parent = node.parent
        was_left = parent is not None and parent.left is node
        pivot = rotation(node)
        pivot.parent = parent
        if parent is None:
            self.root = pivot
        elif was_left:
            parent.left = pivot
        else:
            parent.right = pivot
        return pivot