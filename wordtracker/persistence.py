"""Persistence for the word index.

The index is stored with pickle so it survives between runs. Trees pickle
themselves as a flat pre-order list, which keeps deep (unbalanced) trees
serializable and lets load rebuild exactly the same shape.

Only load repositories you wrote yourself: unpickling untrusted data can
execute arbitrary code.
"""

import logging
import os
import pickle
import tempfile
from pathlib import Path
from typing import Union

from .core.tree import BinarySearchTree
from .domain.word import WordRecord
from .exceptions import RepositoryError

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def serialize(tree: BinarySearchTree) -> bytes:
    """Encode a tree and everything it stores as bytes.

    Args:
        tree: Tree to encode

    Returns:
        Pickled payload
    """
    return pickle.dumps({'format': FORMAT_VERSION, 'tree': tree},
                        protocol=pickle.HIGHEST_PROTOCOL)


def deserialize(data: bytes) -> BinarySearchTree:
    """Decode bytes written by ``serialize``.

    Args:
        data: Pickled payload

    Returns:
        Reconstructed tree with the same shape and elements

    Raises:
        RepositoryError: If the payload is corrupt, not a tree, or holds
            elements other than WordRecord
    """
    try:
        payload = pickle.loads(data)
    except Exception as e:
        raise RepositoryError(f"Cannot decode index: {e}") from e

    if not isinstance(payload, dict) or payload.get('format') != FORMAT_VERSION:
        raise RepositoryError("Unrecognized index format")

    tree = payload.get('tree')
    if not isinstance(tree, BinarySearchTree):
        raise RepositoryError(f"Expected BinarySearchTree, found {type(tree).__name__}")

    for element in tree.preorder_iterator():
        if not isinstance(element, WordRecord):
            raise RepositoryError(
                f"Index holds {type(element).__name__} elements, expected WordRecord"
            )
    return tree


def save_repository(tree: BinarySearchTree, path: Union[str, Path]) -> None:
    """Write the tree to ``path``.

    The payload goes to a temporary file in the same directory first and
    then replaces the target, so an interrupted save leaves the previous
    repository intact.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = serialize(tree)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, 'wb') as handle:
            handle.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info(f"[+] Index of {tree.size()} words saved to {path}")


def load_repository(path: Union[str, Path]) -> BinarySearchTree:
    """Read the tree stored at ``path``.

    A missing, unreadable or corrupt repository yields a fresh empty tree;
    the problem is logged as a warning.

    Returns:
        The stored tree, or an empty one
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"[+] No repository at {path}, starting a new index")
        return BinarySearchTree()

    try:
        tree = deserialize(path.read_bytes())
    except (OSError, RepositoryError) as e:
        logger.warning(f"[!] Could not load repository {path}: {e}. Starting a new index")
        return BinarySearchTree()

    logger.info(f"[+] Index of {tree.size()} words loaded from {path}")
    return tree
