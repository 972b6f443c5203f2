"""Explicit construction of filesystem paths.

Library functions in :mod:`fsutil.filesystem` take :class:`pathlib.Path`
values only. Strings coming from users (CLI arguments, config files) are
turned into paths here, at the call boundary.
"""

import os
from pathlib import Path


def to_path(value: str | os.PathLike[str]) -> Path:
    """Build a Path from a string or path-like value.

    The user home shortcut (``~``) is expanded. The path is not resolved
    and does not need to exist.

    Args:
        value: Raw path string or path-like object.

    Returns:
        Path referencing the given location.

    Raises:
        ValueError: If the value is empty or whitespace only.
    """
    raw = os.fspath(value)
    if not raw.strip():
        msg = "Path cannot be empty"
        raise ValueError(msg)
    return Path(raw).expanduser()


def to_paths(values: list[str]) -> list[Path]:
    """Build a list of Paths, preserving input order."""
    return [to_path(v) for v in values]
