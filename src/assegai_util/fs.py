"""Filesystem helpers. The path engine never calls into this module."""

import logging
import os
import shutil
from pathlib import Path

from assegai_util.errors import ArgumentError

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def empty_directory(directory: PathLike) -> bool:
    """Delete everything inside *directory*, keeping the directory itself.

    Subdirectories are removed recursively. Symlinks are unlinked, never
    followed.

    Args:
        directory: Directory to empty.

    Returns:
        bool: False if *directory* is not a directory, True once it is empty.

    Raises:
        ArgumentError: If *directory* is not a str or path-like object.
    """
    if not isinstance(directory, (str, os.PathLike)):
        raise ArgumentError(f"Expected a path, got {type(directory).__name__}.")

    root = Path(directory)
    if not root.is_dir():
        logger.debug("empty_directory: %s is not a directory", root)
        return False

    for child in root.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
        logger.debug("empty_directory: removed %s", child)
    return True
