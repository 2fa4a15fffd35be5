"""Core data structures for WordTracker.

This package contains the binary search tree, its node type and the
snapshot traversal iterators. None of it knows about words or files.
"""

from .node import BSTreeNode
from .traverser import (
    TreeIterator,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    create_iterator,
)
from .tree import BinarySearchTree

__all__ = [
    "BSTreeNode",
    "TreeIterator",
    "InorderIterator",
    "PreorderIterator",
    "PostorderIterator",
    "create_iterator",
    "BinarySearchTree",
]
