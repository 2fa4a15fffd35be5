"""Word aggregation driver for WordTracker.

WordTracker feeds (word, file, line) triples into a BinarySearchTree of
WordRecords. A word that is already indexed is merged into the existing
record in place; records are never re-inserted.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .tokenizer import tokenize_lines
from .word import WordRecord
from ..config import DEFAULT_DELIMITERS
from ..core.tree import BinarySearchTree

logger = logging.getLogger(__name__)


class WordTracker:
    """Index of words across files, backed by a BinarySearchTree.

    Example:
        >>> tracker = WordTracker()
        >>> tracker.track_lines(["The cat", "the end"], "a.txt")
        4
        >>> tracker.lookup("THE").occurrences
        {'a.txt': [1, 2]}
    """

    def __init__(self,
                 tree: Optional[BinarySearchTree] = None,
                 delimiters: str = DEFAULT_DELIMITERS):
        """Initialize tracker.

        Args:
            tree: Existing index to extend (a new empty tree if None)
            delimiters: Characters separating words within a line
        """
        self.tree = tree if tree is not None else BinarySearchTree()
        self.delimiters = delimiters

    def record(self, word: str, file: str, line: int) -> WordRecord:
        """Record one occurrence of ``word``.

        Args:
            word: Word text in any case
            file: Identifier of the source file
            line: 1-based line number

        Returns:
            The record that now holds the occurrence

        Raises:
            InvalidArgumentError: If word or file is empty, or line is not positive
        """
        probe = WordRecord(word)
        node = self.tree.search(probe)
        if node is not None:
            node.element.add_occurrence(file, line)
            return node.element

        probe.add_occurrence(file, line)
        self.tree.insert(probe)
        return probe

    def track_lines(self, lines: Iterable[str], file: str) -> int:
        """Tokenize and record every word in ``lines``.

        Args:
            lines: Text lines, the first being line 1
            file: Identifier recorded for each occurrence

        Returns:
            Number of word occurrences recorded
        """
        count = 0
        for token, line_number in tokenize_lines(lines, self.delimiters):
            self.record(token, file, line_number)
            count += 1
        return count

    def track_file(self, path: Union[str, Path], encoding: str = "utf-8") -> int:
        """Read a text file and record every word in it.

        ``str(path)`` is the file identifier, so callers wanting the name
        exactly as the user typed it should pass a string rather than a Path
        (``Path("./a.txt")`` becomes ``a.txt``).

        Returns:
            Number of word occurrences recorded

        Raises:
            OSError: If the file cannot be read
        """
        file_id = str(path)
        words_before = self.tree.size()
        with open(path, "r", encoding=encoding) as handle:
            count = self.track_lines(handle, file_id)
        logger.info(
            f"Tracked {count} words from {file_id} "
            f"({self.tree.size() - words_before} new, {self.tree.size()} indexed)"
        )
        return count

    def lookup(self, word: str) -> Optional[WordRecord]:
        """Return the record for ``word`` (any case), or None."""
        node = self.tree.search(WordRecord(word))
        return node.element if node is not None else None

    def words(self) -> List[WordRecord]:
        """All records in alphabetical order."""
        return list(self.tree.inorder_iterator())

    def word_count(self) -> int:
        """Number of distinct words indexed."""
        return self.tree.size()
