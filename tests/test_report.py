"""Tests for report collectors and rendering."""

import pytest

from wordtracker import (
    FileCollector,
    LineCollector,
    OccurrenceCollector,
    ReportMode,
    WordRecord,
    WordTracker,
    render_report,
    write_report,
)
from wordtracker.report import create_collector


@pytest.fixture
def the_record():
    record = WordRecord("The")
    record.add_occurrence("a.txt", 1)
    record.add_occurrence("b.txt", 1)
    record.add_occurrence("a.txt", 3)
    return record


def test_file_collector(the_record):
    assert FileCollector().collect(the_record, 1) == [
        "1 Key : the",
        "  Found in file: a.txt",
        "  Found in file: b.txt",
    ]


def test_line_collector(the_record):
    assert LineCollector().collect(the_record, 2) == [
        "2 Key : the",
        "  Found in file: a.txt on lines: [1, 3]",
        "  Found in file: b.txt on lines: [1]",
    ]


def test_occurrence_collector(the_record):
    assert OccurrenceCollector().collect(the_record, 3) == [
        "3 Key : the",
        "  Found in file: a.txt on lines: [1, 3]",
        "  Found in file: b.txt on lines: [1]",
        "  Total occurrences: 3",
    ]


@pytest.mark.parametrize("mode, cls", [
    (ReportMode.FILES, FileCollector),
    (ReportMode.LINES, LineCollector),
    (ReportMode.OCCURRENCES, OccurrenceCollector),
])
def test_create_collector(mode, cls):
    assert type(create_collector(mode)) is cls


def test_render_report_numbers_alphabetically():
    tracker = WordTracker()
    tracker.track_lines(["dog cat", "bird cat"], "x.txt")

    text = render_report(tracker.tree.inorder_iterator(), ReportMode.OCCURRENCES)
    assert text == (
        "1 Key : bird\n"
        "  Found in file: x.txt on lines: [2]\n"
        "  Total occurrences: 1\n"
        "2 Key : cat\n"
        "  Found in file: x.txt on lines: [1, 2]\n"
        "  Total occurrences: 2\n"
        "3 Key : dog\n"
        "  Found in file: x.txt on lines: [1]\n"
        "  Total occurrences: 1\n"
    )


def test_render_empty_report():
    assert render_report([], ReportMode.FILES) == ""


def test_write_report(tmp_path):
    path = tmp_path / "out.txt"
    write_report("1 Key : a\n", path)
    assert path.read_text(encoding="utf-8") == "1 Key : a\n"


def test_write_report_to_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_report("x", tmp_path / "no" / "such" / "out.txt")
