"""Shared types and utilities for CLI commands.

This module provides helpers used across multiple CLI command modules
to avoid code duplication.
"""

from pathlib import Path

import typer

from fsutil.filesystem.paths import to_path, to_paths
from fsutil.utils.formatting import print_error


def parse_paths(values: list[str]) -> list[Path]:
    """Convert raw CLI arguments to paths, exiting on invalid input.

    Args:
        values: Path strings as given on the command line.

    Returns:
        List of paths in argument order.

    Raises:
        typer.Exit: If any argument is empty.
    """
    try:
        return to_paths(values)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def parse_path(value: str) -> Path:
    """Convert a single raw CLI argument to a path, exiting on invalid input."""
    try:
        return to_path(value)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
