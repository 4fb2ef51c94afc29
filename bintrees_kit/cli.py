"""Command that draws a small sample binary tree."""

from __future__ import annotations

import argparse

from .printing import print_tree
from .tree import Node


def _sample_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def main(argv: list[str] | None = None) -> int:
    """Print the sample tree to standard output and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="bintrees-kit", description="Draw a sample binary tree."
    )
    parser.parse_args(argv)
    print_tree(_sample_tree())
    return 0