"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections.abc import Iterable

from .tree import Node


def is_heap(tree: Node | None) -> bool:
    """Return True if the tree is complete and no child exceeds its parent."""
    if tree is None:
        return False
    size = tree.size()

    def valid(node: Node | None, index: int) -> bool:
        if node is None:
            return True
        if index >= size:
            return False
        if any(
            child is not None and child.value > node.value
            for child in (node.left, node.right)
        ):
            return False
        return valid(node.left, 2 * index + 1) and valid(node.right, 2 * index + 2)

    return valid(tree, 0)


class MaxHeap:
    """A max binary heap kept as a complete tree of linked nodes."""

    __slots__ = ("root",)

    def __init__(self, root: Node | None = None) -> None:
        self.root = root

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> MaxHeap:
        """Build a heap by inserting the values in order."""
        heap = cls()
        for value in values:
            heap.insert(value)
        return heap

    def __len__(self) -> int:
        return 0 if self.root is None else self.root.size()

    def _node_at(self, position: int) -> Node:
        """Return the node at a 1-based level-order position."""
        node = self.root
        for bit in bin(position)[3:]:
            node = node.right if bit == "1" else node.left
        return node

    def insert(self, value: int) -> Node:
        """Insert a value; return the node that holds it once the heap is restored."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        position = len(self) + 1
        parent = self._node_at(position // 2)
        node = Node(value, parent)
        if position % 2:
            parent.right = node
        else:
            parent.left = node
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value."""
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        size = len(self)
        if size == 1:
            self.root = None
            return top
        last = self._node_at(size)
        parent = last.parent
        if parent.left is last:
            parent.left = None
        else:
            parent.right = None
        last.parent = None
        self.root.value = last.value
        self._sift_down(self.root)
        return top

    @staticmethod
    def _sift_down(node: Node) -> None:
        while True:
            left_value = node.left.value if node.left is not None else node.value
            right_value = node.right.value if node.right is not None else node.value
            child = node.left if left_value > right_value else node.right
            if child is None or child.value <= node.value:
                return
            node.value, child.value = child.value, node.value
            node = child

    def to_sorted_list(self) -> list[int]:
        """Empty the heap, returning its values from largest to smallest."""
        return [self.extract() for _ in range(len(self))]