"""Text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from .tree import Node


def _levels_below(node: Node) -> int:
    heights = [1 + _levels_below(c) for c in (node.left, node.right) if c is not None]
    return max(heights, default=0)


def format_tree(tree: Node | None) -> str:
    """Render a tree as text, one line per level, each line ending in a newline."""
    if tree is None:
        return ""
    rows = _levels_below(tree) + 1
    total = sum(len(f"({value:03d})") for value in tree.preorder())
    canvas = [[" "] * (total + 8) for _ in range(rows)]

    def draw(node: Node | None, offset: int, depth: int) -> int:
        if node is None:
            return 0
        is_left = node.parent is not None and node.parent.left is node
        label = f"({node.value:03d})"
        width = len(label)
        left = draw(node.left, offset, depth + 1)
        right = draw(node.right, offset + left + width, depth + 1)
        start = offset + left
        canvas[depth][start:start + width] = label
        if depth:
            above = canvas[depth - 1]
            if is_left:
                begin = start + width // 2
                above[begin:begin + width + right] = "-" * (width + right)
            else:
                begin = offset - width // 2
                above[begin:begin + left + width] = "-" * (left + width)
            above[start + width // 2] = "."
        return left + width + right

    draw(tree, 0, 0)
    return "".join("".join(row).rstrip() + "\n" for row in canvas)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the rendering of a tree to a stream, standard output by default."""
    out = sys.stdout if file is None else file
    out.write(format_tree(tree))