# bintrees_kit

Linked binary trees in plain Python: generic nodes with parent links, binary
search trees, AVL trees, max binary heaps, and a printer that draws a tree as
ASCII art. No third-party libraries are needed.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Generic binary trees

`bintrees_kit.tree.Node` holds an integer `value` and links to its `parent`,
`left` and `right` nodes.

```python
from bintrees_kit.tree import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)

list(root.preorder())    # [98, 12, 54, 402]
list(root.inorder())     # [12, 54, 98, 402]
list(root.postorder())   # [54, 12, 402, 98]
root.height()            # 2: edges on the longest downward path
root.size()              # 4
root.leaves()            # 2
root.internal_nodes()    # 2: nodes with at least one child
root.balance()           # left height minus right height
root.is_full(), root.is_perfect()
root.left.right.depth()  # 2
root.left.right.uncle()  # the node holding 402
```

`insert_left` and `insert_right` put the new node between the parent and its
old child, which becomes the new node's child on the same side. `is_leaf`,
`is_root` and `sibling` complete the node methods.

`bintrees_kit.properties` has tree-wide functions:

- `lowest_common_ancestor(first, second)`: the deepest node above or equal to
  both, or `None`.
- `levelorder(tree)`: values level by level, left to right.
- `is_complete(tree)`: every level filled except possibly the last, packed left.
- `rotate_left(tree)` / `rotate_right(tree)`: rotate and return the new root.
- `is_bst(tree)`: a search tree with distinct values.

Each of these returns `None`, nothing, or `False` when given `None`.

## Search trees and heaps

```python
from bintrees_kit.bst import BinarySearchTree
from bintrees_kit.avl import AVLTree, is_avl
from bintrees_kit.heap import MaxHeap, is_heap

bst = BinarySearchTree.from_iterable([79, 47, 68, 87, 84, 91])
bst.search(68)           # the node holding 68, or None
bst.remove(47)           # True; False if the value was absent
68 in bst, len(bst), list(bst)   # iteration is in sorted order

avl = AVLTree.from_iterable([98, 402, 12, 46, 128, 256, 512, 50])
avl.insert(1)
avl.remove(128)
is_avl(avl.root)         # True
balanced = AVLTree.from_sorted([1, 2, 3, 4, 5, 6, 7])

heap = MaxHeap.from_iterable([79, 47, 68, 87, 84, 91])
is_heap(heap.root)       # True
heap.extract()           # 91
heap.to_sorted_list()    # [87, 84, 79, 68, 47], leaving the heap empty
```

`insert` on a search tree returns the new node, or `None` when the value is
already present: duplicates are ignored. `AVLTree` rebalances after every
insertion and removal; `from_sorted` expects ascending, distinct values.
`MaxHeap` keeps duplicates, and `extract` on an empty heap raises
`IndexError`.

## Printing

```python
from bintrees_kit.printing import format_tree, print_tree

print_tree(root)                 # to standard output
text = format_tree(root)         # the same drawing as a string
```

Each value is drawn as `(NNN)`, zero-padded to three digits, with connector
lines to its children, one text line per level.

## Command line

```
bintrees-kit
```

builds a fixed sample tree of seven nodes and prints it. It takes no options
besides `--help`; it does not read trees from files or input.