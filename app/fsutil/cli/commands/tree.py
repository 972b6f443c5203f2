"""Tree command implementation.

Prints a directory tree using the configured tree format, with
per-invocation overrides.
"""

from typing import Annotated

import typer
from pydantic import ValidationError

from fsutil.cli.types import parse_path
from fsutil.core.config import TreeFormatError, resolve_tree_format
from fsutil.filesystem.printer import TreeFormat, print_tree
from fsutil.utils.formatting import print_error


def tree(
    path: Annotated[str, typer.Argument(help="File or directory to print.", show_default=False)],
    indent: Annotated[
        str | None,
        typer.Option("--indent", help="Indent unit per depth level."),
    ] = None,
    dir_marker: Annotated[
        str | None,
        typer.Option("--dir-marker", help="Marker placed before directory names."),
    ] = None,
    file_marker: Annotated[
        str | None,
        typer.Option("--file-marker", help="Marker placed before file names."),
    ] = None,
    template: Annotated[
        str | None,
        typer.Option(
            "--template",
            "-t",
            help="Line template with {indent}, {marker}, {name} and {length} fields.",
        ),
    ] = None,
) -> None:
    """Pretty print a file or a directory tree with entry sizes.

    Unlike the library printer, which prints nothing for a missing path,
    this command reports a missing PATH as an error and exits with code 1.
    """
    target = parse_path(path)

    try:
        tree_format = resolve_tree_format()
    except TreeFormatError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    overrides = {
        "indent": indent,
        "directory_marker": dir_marker,
        "file_marker": file_marker,
        "line_template": template,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        try:
            tree_format = TreeFormat(**{**tree_format.model_dump(), **overrides})
        except ValidationError as e:
            print_error(f"Invalid tree format: {e}")
            raise typer.Exit(code=1) from None

    if not target.exists():
        print_error(f"Path does not exist: {target}")
        raise typer.Exit(code=1)

    print_tree(target, tree_format)
