"""Test fixtures for WordTracker consumers.

These helpers expose tree shape for verification without making node
layout part of the public API of BinarySearchTree.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..core.node import BSTreeNode
from ..core.tree import BinarySearchTree


def build_tree(keys: Iterable[Any]) -> BinarySearchTree:
    """Insert ``keys`` in order into a new tree (duplicates are skipped by the tree)."""
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key)
    return tree


def write_corpus(directory: Path, files: Dict[str, str]) -> Dict[str, Path]:
    """Write text files into ``directory``.

    Args:
        directory: Existing directory
        files: File name -> content

    Returns:
        File name -> written path
    """
    paths = {}
    for name, content in files.items():
        path = Path(directory) / name
        path.write_text(content, encoding="utf-8")
        paths[name] = path
    return paths


class TreeShapeHelper:
    """Public test fixture for inspecting tree structure.

    Example:
        helper = TreeShapeHelper(tree)
        before = helper.link_snapshot()
        tree.insert(existing_key)
        assert helper.link_snapshot() == before
    """

    def __init__(self, tree: BinarySearchTree):
        self._tree = tree

    def _nodes(self) -> List[BSTreeNode]:
        if self._tree.is_empty():
            return []
        nodes = []
        stack = [self._tree.get_root()]
        while stack:
            node = stack.pop()
            nodes.append(node)
            for child in (node.right, node.left):
                if child is not None:
                    stack.append(child)
        return nodes

    def shape(self) -> Optional[Tuple]:
        """Nested (element, left_shape, right_shape) tuples, None for an empty tree."""
        def _shape(node: Optional[BSTreeNode]) -> Optional[Tuple]:
            if node is None:
                return None
            return (node.element, _shape(node.left), _shape(node.right))

        return _shape(self._tree.get_root()) if not self._tree.is_empty() else None

    def link_snapshot(self) -> Dict[int, Tuple[Optional[int], Optional[int]]]:
        """Map each node's id to the ids of its children."""
        return {
            id(node): (
                id(node.left) if node.left is not None else None,
                id(node.right) if node.right is not None else None,
            )
            for node in self._nodes()
        }

    def node_count(self) -> int:
        """Count nodes reachable from the root."""
        return len(self._nodes())

    def is_ordered(self) -> bool:
        """Check the search-tree ordering invariant on every node."""
        if self._tree.is_empty():
            return True
        # (node, lower bound, upper bound)
        stack: List[Tuple[BSTreeNode, Any, Any]] = [(self._tree.get_root(), None, None)]
        while stack:
            node, low, high = stack.pop()
            if low is not None and not low < node.element:
                return False
            if high is not None and not node.element < high:
                return False
            if node.left is not None:
                stack.append((node.left, low, node.element))
            if node.right is not None:
                stack.append((node.right, node.element, high))
        return True
