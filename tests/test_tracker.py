"""Tests for the WordTracker aggregation policy."""

import pytest

from wordtracker import BinarySearchTree, InvalidArgumentError, WordRecord, WordTracker


def test_record_merges_case_insensitive_duplicates():
    tracker = WordTracker()
    tracker.record("The", "a.txt", 1)
    tracker.record("the", "b.txt", 1)
    tracker.record("THE", "a.txt", 3)

    record = tracker.lookup("the")
    assert record.key == "the"
    assert record.occurrences == {"a.txt": [1, 3], "b.txt": [1]}
    assert record.frequency == 3
    assert tracker.word_count() == 1


def test_record_returns_stored_record():
    tracker = WordTracker()
    first = tracker.record("Cat", "a.txt", 1)
    second = tracker.record("cat", "a.txt", 2)
    assert first is second
    assert tracker.tree.search(WordRecord("cat")).element is first


def test_same_line_twice_is_kept():
    tracker = WordTracker()
    tracker.record("ha", "a.txt", 4)
    tracker.record("ha", "a.txt", 4)
    assert tracker.lookup("ha").occurrences == {"a.txt": [4, 4]}


def test_invalid_occurrence_does_not_insert():
    tracker = WordTracker()
    with pytest.raises(InvalidArgumentError):
        tracker.record("word", "a.txt", 0)
    assert tracker.word_count() == 0


def test_lookup_missing():
    assert WordTracker().lookup("absent") is None


def test_track_lines():
    tracker = WordTracker()
    count = tracker.track_lines(["The cat", "the end"], "a.txt")
    assert count == 4
    assert [r.key for r in tracker.words()] == ["cat", "end", "the"]
    assert tracker.lookup("THE").occurrences == {"a.txt": [1, 2]}


def test_track_file(corpus):
    tracker = WordTracker()
    assert tracker.track_file(corpus["a.txt"]) == 8
    assert tracker.track_file(str(corpus["b.txt"])) == 3

    a, b = str(corpus["a.txt"]), str(corpus["b.txt"])
    the = tracker.lookup("the")
    assert the.occurrences == {a: [1, 3], b: [1]}
    assert the.frequency == 3
    assert tracker.lookup("cat").occurrences == {a: [1], b: [1]}
    assert [r.key for r in tracker.words()] == [
        "a", "again", "barked", "cat", "dog", "end", "sat", "the",
    ]


def test_track_missing_file(tmp_path):
    tracker = WordTracker()
    with pytest.raises(OSError):
        tracker.track_file(tmp_path / "missing.txt")
    assert tracker.word_count() == 0


def test_extends_existing_tree():
    tree = BinarySearchTree()
    WordTracker(tree).record("alpha", "x.txt", 1)
    tracker = WordTracker(tree)
    tracker.record("alpha", "y.txt", 2)
    assert tree.size() == 1
    assert tracker.lookup("alpha").frequency == 2
