"""BSTreeNode abstraction for WordTracker.

The node is intentionally kept simple - it's a data container holding one
element and links to at most two children. Ordering and navigation logic
live in BinarySearchTree, which is the only owner of nodes.
"""

from typing import Any, Optional


class BSTreeNode:
    """A single node of a binary search tree.

    Invariant maintained by the owning tree: every element reachable through
    ``left`` compares less than ``element`` and every element reachable
    through ``right`` compares greater.
    """

    __slots__ = ("element", "left", "right")

    def __init__(self,
                 element: Any,
                 left: Optional['BSTreeNode'] = None,
                 right: Optional['BSTreeNode'] = None):
        """Initialize a node.

        Args:
            element: Value stored in this node
            left: Root of the smaller-valued subtree
            right: Root of the larger-valued subtree
        """
        self.element = element
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def child_count(self) -> int:
        """Return the number of immediate children (0, 1 or 2)."""
        return (self.left is not None) + (self.right is not None)

    def __str__(self) -> str:
        return str(self.element)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(element={self.element!r})"
