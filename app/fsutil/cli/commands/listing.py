"""Listing commands."""

from typing import Annotated

import typer

from fsutil.cli.types import parse_paths
from fsutil.filesystem import listing
from fsutil.utils.formatting import print_paths

ListArgument = Annotated[
    list[str],
    typer.Argument(help="Files or directories to list.", show_default=False),
]


def ls(paths: ListArgument) -> None:
    """List files, or the direct children of directories."""
    print_paths(listing.ls(parse_paths(paths)))


def lsr(
    paths: ListArgument,
    files_only: Annotated[
        bool,
        typer.Option("--files-only", "-f", help="Leave directories out of the listing."),
    ] = False,
) -> None:
    """List files and directories recursively, parents before contents."""
    print_paths(listing.lsr(parse_paths(paths), suppress_directories=files_only))
