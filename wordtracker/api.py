"""High-level API for WordTracker.

This module provides simple, functional interfaces for common indexing
operations. These functions wrap the object-oriented API (WordTracker,
BinarySearchTree, the persistence layer) for ease of use in simple cases.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Union

from .config import DEFAULT_DELIMITERS, ReportMode, TraversalOrder
from .core.tree import BinarySearchTree
from .domain.tracker import WordTracker
from .domain.word import WordRecord
from .persistence import load_repository, save_repository
from .report import render_report


def build_index(
    paths: Iterable[Union[str, Path]],
    tree: Optional[BinarySearchTree] = None,
    encoding: str = "utf-8",
    delimiters: str = DEFAULT_DELIMITERS,
) -> BinarySearchTree:
    """Index every word in the given files.

    Args:
        paths: Text files to read
        tree: Existing index to extend (new tree if None)
        encoding: Text encoding of the files
        delimiters: Characters separating words

    Returns:
        The tree holding one WordRecord per distinct word

    Raises:
        OSError: If a file cannot be read

    Example:
        >>> tree = build_index(["a.txt", "b.txt"])
        >>> [record.key for record in tree]
        ['a', 'cat', 'the']
    """
    tracker = WordTracker(tree, delimiters=delimiters)
    for path in paths:
        tracker.track_file(path, encoding=encoding)
    return tracker.tree


def update_repository(
    paths: Iterable[Union[str, Path]],
    repository: Union[str, Path],
    encoding: str = "utf-8",
) -> BinarySearchTree:
    """Load a persisted index, add the given files, and save it back.

    Returns:
        The updated tree
    """
    tree = build_index(paths, load_repository(repository), encoding=encoding)
    save_repository(tree, repository)
    return tree


def iter_words(
    tree: BinarySearchTree,
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
) -> Iterator[WordRecord]:
    """Iterate the records of an index in the given order (alphabetical by default)."""
    yield from tree.iterator(order)


def find_words(
    tree: BinarySearchTree,
    predicate: Callable[[WordRecord], bool],
) -> Iterator[WordRecord]:
    """Yield records, alphabetically, for which ``predicate`` is true.

    Example:
        >>> for record in find_words(tree, lambda r: r.frequency > 10):
        ...     print(record.key)
    """
    for record in tree.inorder_iterator():
        if predicate(record):
            yield record


def render_index_report(tree: BinarySearchTree, mode: ReportMode = ReportMode.LINES) -> str:
    """Render the alphabetical report for an index."""
    return render_report(tree.inorder_iterator(), mode)


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about an index.

    Returns:
        Dictionary with word, occurrence, file and shape statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Distinct words: {stats['total_words']}")
    """
    stats: Dict[str, Any] = {
        'total_words': tree.size(),
        'total_occurrences': 0,
        'files': set(),
        'height': tree.get_height(),
        'most_frequent': None,
    }

    best = 0
    for record in tree.inorder_iterator():
        frequency = record.frequency
        stats['total_occurrences'] += frequency
        stats['files'].update(record.files)
        if frequency > best:
            best = frequency
            stats['most_frequent'] = record.key

    stats['files'] = sorted(stats['files'])
    return stats
