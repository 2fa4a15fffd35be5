"""WordRecord - the element type stored in the word index.

A WordRecord pairs a case-folded key with every place the word was seen.
Ordering, equality and hashing use the key alone, so two records for
"The" and "the" are the same tree entry.
"""

from functools import total_ordering
from typing import Dict, List

from ..exceptions import InvalidArgumentError


def normalize(word: str) -> str:
    """Case-fold a word into its index key."""
    return word.casefold()


@total_ordering
class WordRecord:
    """A word and its occurrences across files.

    Attributes:
        key: Case-folded word text
        occurrences: File identifier -> line numbers, in the order they were
            recorded. Repeated (file, line) pairs are kept.
    """

    def __init__(self, word: str):
        """Create a record with no occurrences.

        Args:
            word: Word text; it is case-folded before being stored

        Raises:
            InvalidArgumentError: If word is None or empty
        """
        if not word:
            raise InvalidArgumentError("Word text cannot be empty")
        self.key: str = normalize(word)
        self.occurrences: Dict[str, List[int]] = {}

    def add_occurrence(self, file: str, line: int) -> None:
        """Record one appearance of the word.

        Args:
            file: Identifier of the source file
            line: 1-based line number

        Raises:
            InvalidArgumentError: If file is empty or line is not a positive int
        """
        if not file:
            raise InvalidArgumentError("File identifier cannot be empty")
        if isinstance(line, bool) or not isinstance(line, int) or line < 1:
            raise InvalidArgumentError(f"Line number must be a positive integer, got {line!r}")
        self.occurrences.setdefault(file, []).append(line)

    @property
    def frequency(self) -> int:
        """Total number of recorded occurrences across all files."""
        return sum(len(lines) for lines in self.occurrences.values())

    @property
    def files(self) -> List[str]:
        """Files the word appears in, in first-seen order."""
        return list(self.occurrences)

    def lines_in(self, file: str) -> List[int]:
        """Line numbers recorded for one file (empty if never seen there)."""
        return list(self.occurrences.get(file, []))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordRecord):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: 'WordRecord') -> bool:
        if not isinstance(other, WordRecord):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r}, frequency={self.frequency})"
