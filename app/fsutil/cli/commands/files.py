"""Delete and create commands.

Each command processes every path it is given and exits with code 1 if
any of them failed.
"""

from typing import Annotated

import typer

from fsutil.cli.types import parse_paths
from fsutil.filesystem import operations
from fsutil.utils.formatting import print_error

PathsArgument = Annotated[list[str], typer.Argument(help="One or more paths.", show_default=False)]


def rm(paths: PathsArgument) -> None:
    """Delete files and empty directories."""
    if not operations.rm(parse_paths(paths)):
        print_error("Some paths could not be deleted (non-empty directory or permission denied).")
        raise typer.Exit(code=1)


def rmrf(paths: PathsArgument) -> None:
    """Recursively delete files and directories."""
    if not operations.rmrf(parse_paths(paths)):
        print_error("Some paths could not be deleted.")
        raise typer.Exit(code=1)


def mkdirs(paths: PathsArgument) -> None:
    """Create directories, including missing parents."""
    if not operations.mkdirs(parse_paths(paths)):
        print_error("Some directories could not be created.")
        raise typer.Exit(code=1)
