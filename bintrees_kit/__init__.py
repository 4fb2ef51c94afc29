"""Binary trees, search trees, AVL trees and max heaps with an ASCII printer."""

__version__ = "0.1.0"
__all__ = ["tree", "printing", "properties", "bst", "avl", "heap", "cli"]