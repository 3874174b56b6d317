"""Binary tree nodes linked to their parent and their two children."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Node:
    """A binary tree node holding a value and links to its parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: Any, parent: Node | None = None) -> None:
        # The parent link is recorded but the parent is not given this node
        # as a child; use insert_left/insert_right for that.
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: Any) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        child = Node(value, self)
        if self.left is not None:
            child.left = self.left
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: Any) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        child = Node(value, self)
        if self.right is not None:
            child.right = self.right
            self.right.parent = child
        self.right = child
        return child

    def detach(self) -> None:
        """Cut this subtree loose from its parent."""
        parent = self.parent
        if parent is None:
            return
        if parent.left is self:
            parent.left = None
        elif parent.right is self:
            parent.right = None
        self.parent = None

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def _walk(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[Any]:
        """Yield the values in pre-order: node, left subtree, right subtree."""
        for node in self._walk():
            yield node.value

    def inorder(self) -> Iterator[Any]:
        """Yield the values in in-order: left subtree, node, right subtree."""
        stack: list[Node] = []
        node: Node | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[Any]:
        """Yield the values in post-order: left subtree, right subtree, node."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def height(self) -> int:
        """Number of edges on the longest path from this node down to a leaf."""
        level = [self]
        result = -1
        while level:
            result += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return result

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        result = 0
        node = self.parent
        while node is not None:
            result += 1
            node = node.parent
        return result

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in self._walk())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        return sum(1 for node in self._walk() if node.is_leaf())

    def nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        return sum(1 for node in self._walk() if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _subtree_height(self.left) - _subtree_height(self.right)

    def is_full(self) -> bool:
        """True if every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self._walk()
        )

    def is_perfect(self) -> bool:
        """True if the tree is full and all leaves lie on the same level."""
        expected = 0
        node: Node | None = self
        while node is not None:
            expected += 1
            node = node.left

        stack: list[tuple[Node, int]] = [(self, 0)]
        while stack:
            current, level = stack.pop()
            if current.is_leaf():
                if level + 1 != expected:
                    return False
                continue
            if current.left is None or current.right is None:
                return False
            stack.append((current.left, level + 1))
            stack.append((current.right, level + 1))
        return True

    def sibling(self) -> Node | None:
        """The other child of this node's parent, if there is one."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, if there is one."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is parent and grandparent.right is not None:
            return grandparent.right
        if grandparent.right is parent and grandparent.left is not None:
            return grandparent.left
        return None


def _subtree_height(node: Node | None) -> int:
    return -1 if node is None else node.height()