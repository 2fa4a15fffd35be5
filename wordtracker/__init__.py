"""WordTracker - word occurrence index backed by a binary search tree.

WordTracker records, for every word found in a set of text files, the files
and line numbers it occurs on. Records live in an unbalanced binary search
tree that is persisted between runs and walked in order to produce
alphabetical reports.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from wordtracker import WordTracker

    tracker = WordTracker()
    tracker.track_file("a.txt")
    for record in tracker.words():
        print(record.key, record.frequency)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core
from .core import (
    BSTreeNode,
    BinarySearchTree,
    TreeIterator,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    create_iterator,
)

# Domain
from .domain import WordRecord, WordTracker, normalize, tokenize, tokenize_lines

# Configuration and errors
from .config import TrackerConfig, LoggingConfig, TraversalOrder, ReportMode
from .exceptions import (
    WordTrackerError,
    InvalidArgumentError,
    EmptyTreeError,
    EndOfSequenceError,
    RepositoryError,
)

# Persistence and reporting
from .persistence import serialize, deserialize, save_repository, load_repository
from .report import (
    ReportCollector,
    FileCollector,
    LineCollector,
    OccurrenceCollector,
    render_report,
    write_report,
)

# High-level API
from .api import (
    build_index,
    update_repository,
    iter_words,
    find_words,
    render_index_report,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    "BSTreeNode",
    "BinarySearchTree",
    "TreeIterator",
    "InorderIterator",
    "PreorderIterator",
    "PostorderIterator",
    "create_iterator",
    # Domain
    "WordRecord",
    "WordTracker",
    "normalize",
    "tokenize",
    "tokenize_lines",
    # Config
    "TrackerConfig",
    "LoggingConfig",
    "TraversalOrder",
    "ReportMode",
    # Errors
    "WordTrackerError",
    "InvalidArgumentError",
    "EmptyTreeError",
    "EndOfSequenceError",
    "RepositoryError",
    # Persistence / reporting
    "serialize",
    "deserialize",
    "save_repository",
    "load_repository",
    "ReportCollector",
    "FileCollector",
    "LineCollector",
    "OccurrenceCollector",
    "render_report",
    "write_report",
    # API
    "build_index",
    "update_repository",
    "iter_words",
    "find_words",
    "render_index_report",
    "get_tree_stats",
]
