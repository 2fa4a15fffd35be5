"""Report collection strategies for WordTracker.

ReportCollectors define what is written for each word during the
alphabetical walk of the index. The same walk produces a different report
depending on the collector chosen for the ReportMode.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Type, Union

from .config import ReportMode
from .domain.word import WordRecord

logger = logging.getLogger(__name__)


class ReportCollector(ABC):
    """Abstract base class for per-word report formatting.

    Every collector starts an entry with the numbered key line; subclasses
    add the detail lines.
    """

    indent = "  "

    def collect(self, record: WordRecord, index: int) -> List[str]:
        """Render one record.

        Args:
            record: Record to describe
            index: 1-based position of the record in the report

        Returns:
            Report lines for this record, without trailing newlines
        """
        return [f"{index} Key : {record.key}"] + self.details(record)

    @abstractmethod
    def details(self, record: WordRecord) -> List[str]:
        """Return the detail lines shown under the key line."""
        pass


class FileCollector(ReportCollector):
    """Lists the files each word appears in."""

    def details(self, record: WordRecord) -> List[str]:
        return [f"{self.indent}Found in file: {file}" for file in record.occurrences]


class LineCollector(ReportCollector):
    """Lists files with the line numbers of every occurrence."""

    def details(self, record: WordRecord) -> List[str]:
        return [
            f"{self.indent}Found in file: {file} on lines: {lines}"
            for file, lines in record.occurrences.items()
        ]


class OccurrenceCollector(LineCollector):
    """Lists files and line numbers, followed by the total frequency."""

    def details(self, record: WordRecord) -> List[str]:
        lines = super().details(record)
        lines.append(f"{self.indent}Total occurrences: {record.frequency}")
        return lines


_COLLECTORS: Dict[ReportMode, Type[ReportCollector]] = {
    ReportMode.FILES: FileCollector,
    ReportMode.LINES: LineCollector,
    ReportMode.OCCURRENCES: OccurrenceCollector,
}


def create_collector(mode: ReportMode) -> ReportCollector:
    """Return the collector for a report mode."""
    return _COLLECTORS[mode]()


def render_report(records: Iterable[WordRecord], mode: ReportMode) -> str:
    """Render records (normally in alphabetical order) as report text.

    Args:
        records: Records to include, in output order
        mode: Which details to show

    Returns:
        Report text; empty string when there are no records
    """
    collector = create_collector(mode)
    lines: List[str] = []
    for index, record in enumerate(records, start=1):
        lines.extend(collector.collect(record, index))
    return "".join(line + "\n" for line in lines)


def write_report(text: str, path: Union[str, Path]) -> None:
    """Write report text to a file.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    path.write_text(text, encoding="utf-8")
    logger.info(f"[+] Report written to {path}")
