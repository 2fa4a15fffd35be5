"""Testing utilities for WordTracker consumers."""

from .fixtures import TreeShapeHelper, build_tree, write_corpus

__all__ = ["TreeShapeHelper", "build_tree", "write_corpus"]
