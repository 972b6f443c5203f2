"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from fsutil import __version__
from fsutil.cli.commands import config, files, listing, tree
from fsutil.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="fsutil",
    help="Local filesystem convenience helpers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fsutil version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: If True, log at DEBUG level, otherwise WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every filesystem operation.",
        ),
    ] = False,
) -> None:
    """fsutil - local filesystem convenience helpers.

    Delete, create, list and print files and directory trees.
    """
    configure_logging(verbose)


# Register commands
app.command("rm")(files.rm)
app.command("rmrf")(files.rmrf)
app.command("mkdirs")(files.mkdirs)
app.command("ls")(listing.ls)
app.command("lsr")(listing.lsr)
app.command("tree")(tree.tree)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
