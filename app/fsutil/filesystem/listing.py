"""Shallow and recursive directory listing.

Listings follow symlinked directories. There is no cycle guard, so a
symlink loop recurses until the interpreter's recursion limit.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def list_children(path: Path) -> list[Path]:
    """Return the direct children of a directory in enumeration order.

    A directory that cannot be read yields no children.

    Args:
        path: Directory to enumerate.

    Returns:
        List of child paths (unsorted).
    """
    try:
        return list(path.iterdir())
    except OSError as e:
        logger.warning("Cannot list directory %s: %s", path, e)
        return []


def is_directory(path: Path) -> bool | None:
    """Classify a path without raising.

    Args:
        path: Path to inspect.

    Returns:
        True for a directory, False for any other existing entry, None if
        the path is missing or its type cannot be determined.
    """
    try:
        if path.is_dir():
            return True
        if path.exists():
            return False
    except OSError:
        logger.warning("Cannot determine type of: %s", path)
    return None


def ls(paths: Sequence[Path]) -> list[Path]:
    """List one or more files and/or directories.

    A directory contributes its direct children (never itself), any other
    existing entry contributes itself, and a missing path contributes
    nothing. Entries whose type cannot be read are logged and skipped.
    Contributions are concatenated in input order.

    Args:
        paths: Paths to list.

    Returns:
        Flattened list of paths, not deduplicated or sorted.
    """
    result: list[Path] = []
    for path in paths:
        kind = is_directory(path)
        if kind is True:
            result.extend(list_children(path))
        elif kind is False:
            result.append(path)
    return result


def lsr(paths: Sequence[Path], suppress_directories: bool = False) -> list[Path]:
    """List one or more files and/or directories, recursively.

    Traversal is pre-order, depth-first: a directory is emitted before its
    contents. With ``suppress_directories`` the directories themselves are
    left out but still traversed.

    Args:
        paths: Paths to list.
        suppress_directories: If True, omit directory entries.

    Returns:
        Every reachable path in traversal order.
    """
    result: list[Path] = []
    _walk(paths, result, suppress_directories)
    return result


def _walk(paths: Sequence[Path], accum: list[Path], suppress_directories: bool) -> None:
    for path in paths:
        kind = is_directory(path)
        if kind is True:
            if not suppress_directories:
                accum.append(path)
            _walk(list_children(path), accum, suppress_directories)
        elif kind is False:
            accum.append(path)
