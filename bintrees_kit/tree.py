"""Binary tree nodes and the basic measurements made on them."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer, linked to its parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; the old left child becomes its left child."""
        child = Node(value, self)
        child.left = self.left
        if child.left is not None:
            child.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; the old right child becomes its right child."""
        child = Node(value, self)
        child.right = self.right
        if child.right is not None:
            child.right.parent = child
        self.right = child
        return child

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield the values of the subtree in pre-order."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield the values of the subtree in in-order."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield the values of the subtree in post-order."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    def height(self) -> int:
        """Number of edges on the longest downward path; a leaf has height 0."""
        if self.is_leaf():
            return 0
        return 1 + max(
            child.height() for child in (self.left, self.right) if child is not None
        )

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return (
            1
            + (self.left.size() if self.left is not None else 0)
            + (self.right.size() if self.right is not None else 0)
        )

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        if self.is_leaf():
            return 1
        return sum(
            child.leaves() for child in (self.left, self.right) if child is not None
        )

    def internal_nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        if self.is_leaf():
            return 0
        return 1 + sum(
            child.internal_nodes()
            for child in (self.left, self.right)
            if child is not None
        )

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """Return True if every node in the subtree has zero or two children."""
        if self.is_leaf():
            return True
        if self.left is None or self.right is None:
            return False
        return self.left.is_full() and self.right.is_full()

    def is_perfect(self) -> bool:
        """Return True if the subtree is full with all leaves on one level."""
        if self.is_leaf():
            return True
        if self.left is None or self.right is None:
            return False
        return (
            self.left.height() == self.right.height()
            and self.left.is_perfect()
            and self.right.is_perfect()
        )

    def sibling(self) -> Node | None:
        """The other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self is self.parent.left:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def _levels(node: Node | None) -> int:
    """Number of nodes on the longest downward path; 0 for an empty tree."""
    if node is None:
        return 0
    return 1 + max(_levels(node.left), _levels(node.right))