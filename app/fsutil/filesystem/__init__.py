"""Local filesystem helpers.

This module provides batch delete and create operations, shallow and
recursive listing, and a directory tree printer.
"""

from fsutil.filesystem.batch import do_all
from fsutil.filesystem.listing import is_directory, list_children, ls, lsr
from fsutil.filesystem.operations import mkdirs, rm, rmrf
from fsutil.filesystem.paths import to_path, to_paths
from fsutil.filesystem.printer import (
    DEFAULT_TREE_FORMAT,
    TreeFormat,
    format_entry,
    print_tree,
    render_tree,
)

__all__ = [
    "DEFAULT_TREE_FORMAT",
    "TreeFormat",
    "do_all",
    "format_entry",
    "is_directory",
    "list_children",
    "ls",
    "lsr",
    "mkdirs",
    "print_tree",
    "render_tree",
    "rm",
    "rmrf",
    "to_path",
    "to_paths",
]
