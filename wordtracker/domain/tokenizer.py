"""Line tokenizer for WordTracker.

Splits text on a fixed set of delimiter characters (whitespace and common
punctuation). Runs of delimiters never produce empty tokens.
"""

import re
from functools import lru_cache
from typing import Iterable, Iterator, List, Tuple

from ..config import DEFAULT_DELIMITERS


@lru_cache(maxsize=8)
def _delimiter_pattern(delimiters: str) -> "re.Pattern":
    return re.compile("[" + re.escape(delimiters) + "]+")


def tokenize(line: str, delimiters: str = DEFAULT_DELIMITERS) -> List[str]:
    """Split one line into word tokens.

    Args:
        line: Text to split
        delimiters: Characters that separate tokens

    Returns:
        Tokens in the order they appear, original case preserved
    """
    return [token for token in _delimiter_pattern(delimiters).split(line) if token]


def tokenize_lines(lines: Iterable[str],
                   delimiters: str = DEFAULT_DELIMITERS) -> Iterator[Tuple[str, int]]:
    """Yield (token, line_number) pairs, numbering lines from 1."""
    for line_number, line in enumerate(lines, start=1):
        for token in tokenize(line, delimiters):
            yield token, line_number
