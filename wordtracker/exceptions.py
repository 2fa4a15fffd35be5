"""Exception hierarchy for WordTracker.

All errors raised by the library derive from WordTrackerError so callers
can catch the whole family at an application boundary. The concrete
classes also derive from the closest builtin so generic handlers
(``except ValueError``) keep working.
"""


class WordTrackerError(Exception):
    """Base class for all WordTracker errors."""
    pass


class InvalidArgumentError(WordTrackerError, ValueError):
    """Raised when a missing or malformed value is passed to the tree or a record."""
    pass


class EmptyTreeError(WordTrackerError, LookupError):
    """Raised when the root of an empty tree is requested."""
    pass


class EndOfSequenceError(WordTrackerError, LookupError):
    """Raised when an iterator is advanced past its last element."""
    pass


class RepositoryError(WordTrackerError):
    """Raised when a persisted index cannot be decoded."""
    pass
