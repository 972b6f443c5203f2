"""Delete and create operations over batches of paths.

Every operation is applied to each path in turn and reports overall
success as a boolean. A missing path is never an error. Filesystem
failures are logged and turned into False for that path; they are not
raised.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from fsutil.filesystem.batch import do_all
from fsutil.filesystem.listing import list_children

logger = logging.getLogger(__name__)


def rm(paths: Sequence[Path]) -> bool:
    """Delete one or more paths without recursing.

    Files and symlinks are unlinked. Directories are removed only when
    empty, so a non-empty directory fails and is left untouched.

    Args:
        paths: Paths to delete.

    Returns:
        True if every path was deleted or did not exist.
    """
    return do_all(paths, _remove)


def rmrf(paths: Sequence[Path]) -> bool:
    """Recursively, forcibly delete one or more paths.

    Directories are emptied depth-first before being removed. A failed
    child does not stop its siblings from being attempted. Symlinks are
    removed as links; their targets are never touched.

    Args:
        paths: Paths to delete.

    Returns:
        True if every path was deleted or did not exist.
    """
    return do_all(paths, _remove_tree)


def mkdirs(paths: Sequence[Path]) -> bool:
    """Create one or more directories, including missing parents.

    Equivalent to ``mkdir -p``: an existing directory counts as success.

    Args:
        paths: Directories to create.

    Returns:
        True if every directory exists afterwards.
    """
    return do_all(paths, _make_dirs)


def _remove(path: Path) -> bool:
    try:
        if path.is_dir() and not path.is_symlink():
            path.rmdir()
        else:
            path.unlink()
    except FileNotFoundError:
        return True
    except OSError as e:
        logger.debug("Cannot delete %s: %s", path, e)
        return False
    logger.debug("Deleted %s", path)
    return True


def _remove_tree(path: Path) -> bool:
    try:
        is_tree = path.is_dir() and not path.is_symlink()
    except OSError as e:
        logger.debug("Cannot inspect %s: %s", path, e)
        return False
    # Post-order: children first, then the now-empty directory
    if is_tree:
        return do_all(list_children(path), _remove_tree) and _remove(path)
    return _remove(path)


def _make_dirs(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug("Cannot create directory %s: %s", path, e)
        return False
    return True
