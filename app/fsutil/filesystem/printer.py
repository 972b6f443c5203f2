"""Directory tree pretty-printer.

Renders a path and, for directories, everything below it, one line per
entry. Formatting is controlled by an immutable :class:`TreeFormat`
passed in by the caller.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, TextIO

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fsutil.filesystem.listing import is_directory, list_children

logger = logging.getLogger(__name__)


class TreeFormat(BaseModel):
    """Line formatting for the tree printer.

    The line template is a ``str.format`` template receiving the named
    fields ``indent``, ``marker``, ``name`` and ``length``.

    Attributes:
        indent: Indent unit, repeated once per depth level.
        directory_marker: Marker placed before directory names.
        file_marker: Marker placed before non-directory names.
        line_template: Template used to build each line.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    indent: Annotated[str, Field(description="Indent unit per depth level")] = "| "
    directory_marker: Annotated[str, Field(description="Marker for directories")] = "+ "
    file_marker: Annotated[str, Field(description="Marker for files")] = ""
    line_template: Annotated[
        str,
        Field(description="Line template (fields: indent, marker, name, length)"),
    ] = "{indent}{marker}{name:<25} ({length} bytes)"

    @field_validator("line_template")
    @classmethod
    def validate_line_template(cls, v: str) -> str:
        """Validate that the template only uses the supported fields."""
        try:
            v.format(indent="", marker="", name="", length=0)
        except (KeyError, IndexError) as e:
            msg = f"line_template references unknown field {e}"
            raise ValueError(msg) from None
        except (ValueError, AttributeError, TypeError) as e:
            msg = f"line_template is invalid: {e}"
            raise ValueError(msg) from None
        return v


DEFAULT_TREE_FORMAT = TreeFormat()


def format_entry(path: Path, depth: int, tree_format: TreeFormat = DEFAULT_TREE_FORMAT) -> str:
    """Format a single tree line for a path.

    Args:
        path: Entry to describe.
        depth: Nesting level, 0 for the root.
        tree_format: Formatting to apply.

    Returns:
        The formatted line, without a trailing newline.
    """
    return _format_line(path, depth, tree_format, is_directory(path) is True)


def render_tree(path: Path, tree_format: TreeFormat = DEFAULT_TREE_FORMAT) -> list[str]:
    """Render a path and its contents as tree lines.

    Children follow their directory at depth + 1, in enumeration order.
    A missing root renders nothing.

    Args:
        path: Root of the tree.
        tree_format: Formatting to apply.

    Returns:
        List of lines in traversal order.
    """
    lines: list[str] = []
    _render(path, 0, tree_format, lines)
    return lines


def print_tree(
    path: Path,
    tree_format: TreeFormat = DEFAULT_TREE_FORMAT,
    file: TextIO | None = None,
) -> None:
    """Pretty print a file or the contents of a directory, recursively.

    Args:
        path: Root of the tree.
        tree_format: Formatting to apply.
        file: Output stream. Defaults to standard output.
    """
    out = file if file is not None else sys.stdout
    for line in render_tree(path, tree_format):
        print(line, file=out)


def _render(path: Path, depth: int, tree_format: TreeFormat, lines: list[str]) -> None:
    kind = is_directory(path)
    if kind is None:
        return
    lines.append(_format_line(path, depth, tree_format, kind))
    if kind:
        for child in list_children(path):
            _render(child, depth + 1, tree_format, lines)


def _entry_length(path: Path) -> int:
    # Directories report whatever size the platform gives them
    try:
        return path.stat().st_size
    except OSError:
        return 0


def _format_line(path: Path, depth: int, tree_format: TreeFormat, is_dir: bool) -> str:
    fields = {
        "indent": tree_format.indent * depth,
        "marker": tree_format.directory_marker if is_dir else tree_format.file_marker,
        "name": path.name or str(path),
        "length": _entry_length(path),
    }
    try:
        return tree_format.line_template.format(**fields)
    except (ValueError, OverflowError) as e:
        # e.g. {length:c} past the Unicode range
        logger.warning("Cannot format %s with line template, using default: %s", path, e)
        return DEFAULT_TREE_FORMAT.line_template.format(**fields)
