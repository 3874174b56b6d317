# bintree

This package provides a small binary tree in which every node keeps a link to
its parent. It supports insertion that pushes existing children down, the
three depth-first traversals and a set of structural measures and queries. It
can also draw a tree as compact ASCII text.

## Installation

```
pip install bintree
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`insert_left(value)` and `insert_right(value)` create a child on that side and
return it. If that side already has a child, the old child moves down under
the new node and stays on the same side.

`Node(value, parent)` records `parent` as the new node's parent. It does not
make the new node a child of `parent`. Use `insert_left` or `insert_right` to
attach a child.

`detach()` removes a node, together with the subtree below it, from its
parent. The node then becomes a root. Calling it on a root does nothing.

## Traversals

`preorder()`, `inorder()` and `postorder()` are generators. Each one yields
the values of the subtree in its order:

```python
list(root.inorder())     # [12, 54, 98, 128, 402]
list(root.preorder())    # [98, 12, 54, 402, 128]
list(root.postorder())   # [54, 12, 128, 402, 98]
```

## Measures and queries

All of these methods work on any node and look at the subtree rooted there.
The exceptions are `depth()`, `is_root()`, `sibling()` and `uncle()`, which
look upwards.

| Method          | Result                                                       |
|-----------------|--------------------------------------------------------------|
| `height()`      | edges on the longest path down to a leaf (a lone node is 0)  |
| `depth()`       | edges from the node up to the root                           |
| `size()`        | number of nodes in the subtree                               |
| `leaves()`      | number of leaves in the subtree                              |
| `nodes()`       | number of nodes with at least one child                      |
| `balance()`     | height of the left subtree minus that of the right           |
| `is_leaf()`     | whether the node has no children                             |
| `is_root()`     | whether the node has no parent                               |
| `is_full()`     | whether every node has zero or two children                  |
| `is_perfect()`  | whether the tree is full with all leaves at the same level   |
| `sibling()`     | the other child of the parent, or `None`                     |
| `uncle()`       | the sibling of the parent, or `None`                         |

When `balance()` looks at a missing subtree, it counts that subtree's height
as -1. As a result, a leaf has a balance of 0.

## Rendering

`render(tree)` returns the tree drawn as text, one line per level, and each
line ends with a newline. Each value appears as a number zero-padded to three
digits in parentheses, so the values must be integers. `render(None)` returns
an empty string.

`print_tree(tree, file)` writes the same drawing to a text stream. When
`file` is not given, it writes to standard output.

```python
import sys
from bintree.printing import print_tree, render

print(render(root), end="")
print_tree(root, sys.stdout)
```

For the tree built above, the output is:

```
  .-------(098)-------.
(012)--.         .--(402)
     (054)     (128)
```

## What it does not do

- The tree does not order or balance itself. Values go exactly where
  `insert_left` and `insert_right` put them, and there is no search,
  removal of a single value or rotation.
- The package is a library only and has no command-line program.