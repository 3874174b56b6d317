"""Binary tree nodes with parent links, traversals, queries and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["node", "printing"]