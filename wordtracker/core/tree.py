"""Binary search tree for WordTracker.

BinarySearchTree is an ordered container of mutually comparable elements.
It rejects duplicates at insert time, never rebalances (its shape is purely
a function of insertion order), and hands out snapshot iterators in the
three depth-first orders.

The tree is not thread-safe. Callers sharing one across threads must guard
the whole tree with a single lock.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .node import BSTreeNode
from .traverser import (
    TreeIterator,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    create_iterator,
)
from ..config import TraversalOrder
from ..exceptions import EmptyTreeError, InvalidArgumentError

logger = logging.getLogger(__name__)


class BinarySearchTree:
    """Unbalanced binary search tree.

    Elements must support ``<`` and ``==`` against each other. Two elements
    that compare equal are the same key; only the first one inserted is
    stored, and callers are expected to merge data into it instead.

    Example:
        >>> tree = BinarySearchTree()
        >>> for key in ["dog", "cat", "bird", "cat"]:
        ...     tree.insert(key)
        True
        True
        True
        False
        >>> list(tree)
        ['bird', 'cat', 'dog']
    """

    def __init__(self, entry: Any = None):
        """Create an empty tree, or a tree holding a single entry.

        Args:
            entry: Optional first element
        """
        self._root: Optional[BSTreeNode] = None
        self._size = 0
        if entry is not None:
            self.insert(entry)

    # Queries

    def size(self) -> int:
        """Return the number of elements stored."""
        return self._size

    def is_empty(self) -> bool:
        """Check if the tree holds no elements."""
        return self._size == 0

    def get_root(self) -> BSTreeNode:
        """Return the root node.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("Tree is empty. No root node.")
        return self._root

    def get_height(self) -> int:
        """Return the height of the tree counted in nodes.

        An empty tree has height 0 and a single node has height 1.
        """
        if self._root is None:
            return 0
        height = 0
        level: List[BSTreeNode] = [self._root]
        while level:
            height += 1
            next_level: List[BSTreeNode] = []
            for node in level:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            level = next_level
        return height

    def search(self, entry: Any) -> Optional[BSTreeNode]:
        """Find the node holding an element equal to ``entry``.

        Args:
            entry: Element to look for

        Returns:
            The matching node, or None if absent

        Raises:
            InvalidArgumentError: If entry is None
        """
        if entry is None:
            raise InvalidArgumentError("Cannot search for None")

        node = self._root
        while node is not None:
            if entry == node.element:
                return node
            node = node.left if entry < node.element else node.right
        return None

    def contains(self, entry: Any) -> bool:
        """Check if an element equal to ``entry`` is stored.

        Raises:
            InvalidArgumentError: If entry is None
        """
        return self.search(entry) is not None

    # Mutation

    def insert(self, entry: Any) -> bool:
        """Insert ``entry`` as a new leaf.

        Args:
            entry: Element to insert

        Returns:
            True if inserted, False if an equal element is already stored
            (the tree is left untouched in that case)

        Raises:
            InvalidArgumentError: If entry is None
        """
        if entry is None:
            raise InvalidArgumentError("Cannot insert None into the tree")

        if self._root is None:
            self._root = BSTreeNode(entry)
            self._size += 1
            return True

        node = self._root
        while True:
            if entry == node.element:
                return False
            if entry < node.element:
                if node.left is None:
                    node.left = BSTreeNode(entry)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTreeNode(entry)
                    break
                node = node.right

        self._size += 1
        return True

    add = insert

    def remove_min(self) -> Optional[Any]:
        """Remove and return the smallest element, or None if empty.

        The minimum never has a left child, so its right subtree (if any)
        takes its place.
        """
        if self._root is None:
            return None

        parent: Optional[BSTreeNode] = None
        current = self._root
        while current.left is not None:
            parent = current
            current = current.left

        if parent is None:
            self._root = current.right
        else:
            parent.left = current.right

        self._size -= 1
        return current.element

    def remove_max(self) -> Optional[Any]:
        """Remove and return the largest element, or None if empty.

        The maximum never has a right child, so its left subtree (if any)
        takes its place.
        """
        if self._root is None:
            return None

        parent: Optional[BSTreeNode] = None
        current = self._root
        while current.right is not None:
            parent = current
            current = current.right

        if parent is None:
            self._root = current.left
        else:
            parent.right = current.left

        self._size -= 1
        return current.element

    def clear(self) -> None:
        """Remove all elements."""
        self._root = None
        self._size = 0

    # Iterators

    def inorder_iterator(self) -> InorderIterator:
        """Snapshot iterator over elements in ascending order."""
        return InorderIterator(self._root)

    def preorder_iterator(self) -> PreorderIterator:
        """Snapshot iterator visiting each node before its children."""
        return PreorderIterator(self._root)

    def postorder_iterator(self) -> PostorderIterator:
        """Snapshot iterator visiting each node after its children."""
        return PostorderIterator(self._root)

    def iterator(self, order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> TreeIterator:
        """Snapshot iterator in the requested order.

        Raises:
            ValueError: If order is not recognized
        """
        return create_iterator(order, self._root)

    # Python protocols

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, entry: Any) -> bool:
        if entry is None:
            return False
        return self.contains(entry)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder_iterator())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, height={self.get_height()})"

    # Pickle support
    #
    # Pickling the linked nodes directly recurses once per level and fails
    # on deep chains, so the shape is stored as a flat pre-order list of
    # (element, has_left, has_right) and rebuilt with an explicit stack.

    def __getstate__(self) -> Dict[str, Any]:
        nodes: List[Tuple[Any, bool, bool]] = []
        stack: List[BSTreeNode] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            nodes.append((node.element, node.left is not None, node.right is not None))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return {'size': self._size, 'nodes': nodes}

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self._root = None
        self._size = 0
        # Pending child slots, top of stack is filled next
        slots: List[Tuple[BSTreeNode, str]] = []
        for element, has_left, has_right in state['nodes']:
            node = BSTreeNode(element)
            if self._root is None:
                self._root = node
            else:
                parent, side = slots.pop()
                setattr(parent, side, node)
            if has_right:
                slots.append((node, 'right'))
            if has_left:
                slots.append((node, 'left'))
            self._size += 1

        if slots or self._size != state['size']:
            raise ValueError(
                f"Inconsistent tree state: {len(slots)} unfilled links, "
                f"{self._size} nodes rebuilt, {state['size']} expected"
            )
        logger.debug(f"Rebuilt tree with {self._size} nodes")
