"""Tree traversal iterators for WordTracker.

Each iterator performs one full walk of the tree when it is constructed and
buffers the visited elements. The buffer is a snapshot: mutating the tree
afterwards does not change what an existing iterator yields. Iterators are
restartable through ``reset()``.

Walks use an explicit stack instead of recursion because the tree is never
rebalanced, and sorted input produces chains deeper than Python's recursion
limit.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Union

from .node import BSTreeNode
from ..config import TraversalOrder
from ..exceptions import EndOfSequenceError


class TreeIterator(ABC):
    """Abstract base class for snapshot traversal iterators.

    Subclasses only define the visiting order in ``_walk``; buffering and
    the cursor protocol are shared.
    """

    def __init__(self, root: Optional[BSTreeNode]):
        """Walk the tree and buffer its elements.

        Args:
            root: Root node of the tree (None for an empty tree)
        """
        self._elements: List[Any] = list(self._walk(root)) if root is not None else []
        self._index = 0

    @abstractmethod
    def _walk(self, root: BSTreeNode) -> Iterator[Any]:
        """Yield elements of the subtree rooted at ``root`` in visiting order."""
        pass

    def has_next(self) -> bool:
        """Check if the cursor has not reached the end of the buffer."""
        return self._index < len(self._elements)

    def next(self) -> Any:
        """Return the current element and advance the cursor.

        Raises:
            EndOfSequenceError: If no elements remain
        """
        if not self.has_next():
            raise EndOfSequenceError(
                f"{self.__class__.__name__} exhausted after {len(self._elements)} elements"
            )
        element = self._elements[self._index]
        self._index += 1
        return element

    def reset(self) -> None:
        """Rewind the cursor to the first element."""
        self._index = 0

    def __iter__(self) -> 'TreeIterator':
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self._index}, length={len(self._elements)})"


class InorderIterator(TreeIterator):
    """In-order traversal: left subtree, node, right subtree.

    Yields elements in ascending order for any tree built through insert.
    """

    def _walk(self, root: BSTreeNode) -> Iterator[Any]:
        stack: List[BSTreeNode] = []
        node: Optional[BSTreeNode] = root
        while stack or node is not None:
            # Descend as far left as possible
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            node = node.right


class PreorderIterator(TreeIterator):
    """Pre-order traversal: node, left subtree, right subtree."""

    def _walk(self, root: BSTreeNode) -> Iterator[Any]:
        stack: List[BSTreeNode] = [root]
        while stack:
            node = stack.pop()
            yield node.element
            # Right pushed first so left is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


class PostorderIterator(TreeIterator):
    """Post-order traversal: left subtree, right subtree, node.

    Parents come after their entire subtree, which makes this the order to
    use for teardown or bottom-up aggregation.
    """

    def _walk(self, root: BSTreeNode) -> Iterator[Any]:
        stack: List[BSTreeNode] = []
        last_visited: Optional[BSTreeNode] = None
        node: Optional[BSTreeNode] = root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            peek = stack[-1]
            if peek.right is not None and peek.right is not last_visited:
                node = peek.right
            else:
                yield peek.element
                last_visited = stack.pop()


# Factory function for creating iterators by name
def create_iterator(order: Union[TraversalOrder, str],
                    root: Optional[BSTreeNode]) -> TreeIterator:
    """Create an iterator instance by traversal order.

    Args:
        order: TraversalOrder or its name (inorder, preorder, postorder, in, pre, post)
        root: Root node of the tree to walk

    Returns:
        TreeIterator instance

    Raises:
        ValueError: If the order name is not recognized
    """
    orders = {
        'inorder': InorderIterator,
        'in': InorderIterator,
        'preorder': PreorderIterator,
        'pre': PreorderIterator,
        'postorder': PostorderIterator,
        'post': PostorderIterator,
    }

    name = order.value if isinstance(order, TraversalOrder) else str(order).lower()
    if name not in orders:
        raise ValueError(
            f"Unknown traversal order: {order}. "
            f"Choose from: {', '.join(orders.keys())}"
        )

    return orders[name](root)
