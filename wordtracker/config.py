"""Configuration system for WordTracker.

This module defines how callers specify a tracking run: where the persisted
index lives, how input is tokenized, which report to produce and where
logging goes.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


DEFAULT_REPOSITORY = "repository.ser"
DEFAULT_DELIMITERS = " \t\n\r\f.,!?;:\"()[]{}<>"


class TraversalOrder(Enum):
    """Order in which tree elements are visited."""
    INORDER = "inorder"      # Left, node, right (ascending)
    PREORDER = "preorder"    # Node before children
    POSTORDER = "postorder"  # Children before node


class ReportMode(Enum):
    """Which details the report shows for each word.

    Values are the command line flags that select them.
    """
    FILES = "-pf"            # Files the word appears in
    LINES = "-pl"            # Files plus line numbers
    OCCURRENCES = "-po"      # Files, line numbers and total frequency

    @classmethod
    def from_flag(cls, flag: str) -> 'ReportMode':
        """Look up a mode by its command line flag.

        Raises:
            ValueError: If the flag is not one of -pf, -pl, -po
        """
        for mode in cls:
            if mode.value == flag:
                return mode
        raise ValueError(
            f"Unknown report flag: {flag}. "
            f"Choose from: {', '.join(m.value for m in cls)}"
        )


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    level: str = "INFO"                 # Console/file log level name
    log_dir: Optional[Path] = None      # Directory for run logs (None = console only)
    color: bool = True                  # ANSI colours on console


@dataclass
class TrackerConfig:
    """Complete configuration for one tracking run."""

    # Persistence
    repository_path: Path = field(default_factory=lambda: Path(DEFAULT_REPOSITORY))

    # Input
    encoding: str = "utf-8"
    delimiters: str = DEFAULT_DELIMITERS

    # Output
    report_mode: ReportMode = ReportMode.LINES
    output_file: Optional[Path] = None

    # Logging
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not Path(self.repository_path).name:
            errors.append("repository_path must name a file")

        if not self.delimiters:
            errors.append("delimiters cannot be empty")

        if self.output_file is not None and not Path(self.output_file).name:
            errors.append("output_file must name a file")

        if self.logging.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"unknown log level: {self.logging.level}")

        try:
            "".encode(self.encoding)
        except LookupError:
            errors.append(f"unknown encoding: {self.encoding}")

        return errors
