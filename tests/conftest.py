"""Shared pytest configuration and fixtures for the WordTracker suite."""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordtracker.logger import LOGGER_NAME
from wordtracker.testing import build_tree, write_corpus


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running scale tests (deselect with -m 'not slow')")


@pytest.fixture
def animal_tree():
    """Tree built from ["dog", "cat", "bird", "cat"] (the last is a duplicate)."""
    return build_tree(["dog", "cat", "bird", "cat"])


@pytest.fixture
def balanced_tree():
    """Seven keys inserted so the tree is perfectly balanced.

        d
       / \\
      b   f
     / \\ / \\
    a  c e  g
    """
    return build_tree(["d", "b", "f", "a", "c", "e", "g"])


@pytest.fixture
def corpus(tmp_path):
    """Two small text files in a temporary directory."""
    return write_corpus(tmp_path, {
        "a.txt": "The cat sat.\nA dog barked!\nthe end\n",
        "b.txt": "THE cat; again\n",
    })


@pytest.fixture
def reset_package_logger():
    """Drop handlers attached by setup_logger so later tests don't write to closed streams."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
