"""Word indexing domain built on the core tree."""

from .word import WordRecord, normalize
from .tokenizer import tokenize, tokenize_lines
from .tracker import WordTracker

__all__ = [
    "WordRecord",
    "normalize",
    "tokenize",
    "tokenize_lines",
    "WordTracker",
]
