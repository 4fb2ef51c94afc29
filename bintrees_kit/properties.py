"""Structural queries and rotations on binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import pairwise

from .tree import Node


def _levels(node: Node | None) -> int:
    """Number of nodes on the longest downward path; 0 for an empty tree."""
    if node is None:
        return 0
    return 1 + max(_levels(node.left), _levels(node.right))


def _lineage(node: Node | None) -> Iterator[Node]:
    """Yield a node followed by each of its ancestors up to the root."""
    while node is not None:
        yield node
        node = node.parent


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both nodes, or None."""
    if first is None or second is None:
        return None
    ancestors_of_second = set(_lineage(second))
    return next(
        (node for node in _lineage(first) if node in ancestors_of_second), None
    )


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of a tree level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)


def _perfect(node: Node | None) -> bool:
    return node is None or node.is_perfect()


def _complete(node: Node) -> bool:
    if node.is_leaf():
        return True
    left_levels = _levels(node.left)
    right_levels = _levels(node.right)
    if left_levels == right_levels:
        return _perfect(node.left) and _complete(node.right)
    if left_levels == right_levels + 1:
        return _complete(node.left) and _perfect(node.right)
    return False


def is_complete(tree: Node | None) -> bool:
    """Return True if every level is filled except possibly the last, packed left."""
    if tree is None:
        return False
    return _complete(tree)


def rotate_left(tree: Node | None) -> Node | None:
    """Rotate a tree to the left and return its new root."""
    if tree is None:
        return None
    pivot = tree.right
    tree.parent = pivot
    if pivot is None:
        return tree
    tree.right = pivot.left
    if tree.right is not None:
        tree.right.parent = tree
    pivot.left = tree
    pivot.parent = None
    return pivot


def rotate_right(tree: Node | None) -> Node | None:
    """Rotate a tree to the right and return its new root."""
    if tree is None:
        return None
    pivot = tree.left
    tree.parent = pivot
    if pivot is None:
        return tree
    tree.left = pivot.right
    if tree.left is not None:
        tree.left.parent = tree
    pivot.right = tree
    pivot.parent = None
    return pivot


def is_bst(tree: Node | None) -> bool:
    """Return True if the tree is a binary search tree without duplicate values."""
    if tree is None:
        return False
    return all(a < b for a, b in pairwise(tree.inorder()))