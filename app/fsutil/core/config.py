"""Tree printer configuration.

Loads and saves the :class:`~fsutil.filesystem.printer.TreeFormat` used
by the ``tree`` command. The format is stored in the ``[tree]`` table of
~/.config/fsutil/tree.toml; any key left out keeps its default.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import ValidationError

from fsutil.core.paths import get_tree_format_path
from fsutil.filesystem.printer import DEFAULT_TREE_FORMAT, TreeFormat

logger = logging.getLogger(__name__)

TREE_TABLE = "tree"


class TreeFormatError(Exception):
    """Base exception for tree format configuration errors."""


class TreeFormatNotFoundError(TreeFormatError):
    """Raised when the tree format file is not found."""


class TreeFormatParseError(TreeFormatError):
    """Raised when the tree format file cannot be parsed."""


def load_tree_format(path: Path | None = None) -> TreeFormat:
    """Load the tree format from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default location.

    Returns:
        Validated TreeFormat.

    Raises:
        TreeFormatNotFoundError: If the config file doesn't exist.
        TreeFormatParseError: If the TOML syntax is invalid.
        TreeFormatError: If the content doesn't match the schema.
    """
    config_path = path or get_tree_format_path()

    if not config_path.exists():
        raise TreeFormatNotFoundError(f"Tree format config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise TreeFormatParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise TreeFormatError(f"Failed to read tree format config: {e}") from e

    section = data.get(TREE_TABLE, {})
    if not isinstance(section, dict):
        raise TreeFormatError(f"'{TREE_TABLE}' must be a table in {config_path}")

    try:
        return TreeFormat.model_validate(section)
    except ValidationError as e:
        raise TreeFormatError(f"Invalid tree format config content: {e}") from e


def resolve_tree_format(path: Path | None = None) -> TreeFormat:
    """Return the configured tree format, or the default if none is configured.

    Args:
        path: Path to the config file. If None, uses the default location.

    Returns:
        TreeFormat from the config file, or DEFAULT_TREE_FORMAT.

    Raises:
        TreeFormatError: If the file exists but is invalid.
    """
    try:
        return load_tree_format(path)
    except TreeFormatNotFoundError:
        logger.debug("No tree format config, using defaults")
        return DEFAULT_TREE_FORMAT


def save_tree_format(tree_format: TreeFormat, path: Path | None = None) -> Path:
    """Save the tree format to a TOML file.

    The file is written to a temporary file in the same directory and
    then moved into place with os.replace().

    Args:
        tree_format: The format to save.
        path: Path to save to. If None, uses the default location.

    Returns:
        Path where the config was saved.

    Raises:
        TreeFormatError: If the file cannot be written.
    """
    config_path = path or get_tree_format_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(tree_format_to_dict(tree_format), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise TreeFormatError(f"Failed to write tree format config: {e}") from e

    logger.debug("Saved tree format to %s", config_path)
    return config_path


def tree_format_to_dict(tree_format: TreeFormat) -> dict[str, object]:
    """Convert a TreeFormat to a dictionary ready for TOML serialization."""
    return {TREE_TABLE: tree_format.model_dump()}
