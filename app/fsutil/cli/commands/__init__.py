"""CLI commands for fsutil.

This package contains all subcommand implementations.
"""

from fsutil.cli.commands import config, files, listing, tree

__all__ = ["config", "files", "listing", "tree"]
