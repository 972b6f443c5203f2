"""fsutil - local filesystem convenience helpers."""

from fsutil.filesystem import (
    DEFAULT_TREE_FORMAT,
    TreeFormat,
    ls,
    lsr,
    mkdirs,
    print_tree,
    render_tree,
    rm,
    rmrf,
    to_path,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TREE_FORMAT",
    "TreeFormat",
    "__version__",
    "ls",
    "lsr",
    "mkdirs",
    "print_tree",
    "render_tree",
    "rm",
    "rmrf",
    "to_path",
]
