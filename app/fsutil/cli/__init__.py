"""CLI package for fsutil.

This package contains the Typer application and all subcommands.
"""

from fsutil.cli.main import app

__all__ = ["app"]
