"""Text rendering of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.node import Node


def _put(row: list[str], col: int, char: str) -> None:
    if col < 0:
        return
    if col >= len(row):
        row.extend(" " * (col + 1 - len(row)))
    row[col] = char


def _layout(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, depth + 1, rows)
    right = _layout(node.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _trim(row: list[str]) -> str:
    line = "".join(row)
    stripped = line.rstrip(" ")
    if len(stripped) < 2:
        return line[:2]
    return stripped


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, each level on its own line."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _layout(tree, 0, 0, rows)
    return "".join(_trim(row) + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to a stream, standard output by default."""
    stream = sys.stdout if file is None else file
    stream.write(render(tree))