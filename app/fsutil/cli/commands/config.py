"""Tree format configuration commands."""

from typing import Annotated

import tomli_w
import typer

from fsutil.core.config import (
    TreeFormatError,
    resolve_tree_format,
    save_tree_format,
    tree_format_to_dict,
)
from fsutil.core.paths import get_tree_format_path
from fsutil.filesystem.printer import DEFAULT_TREE_FORMAT
from fsutil.utils.formatting import print_error, print_info, print_plain, print_success

app = typer.Typer(
    help="Show or initialize the tree format configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective tree format."""
    config_path = get_tree_format_path()
    try:
        tree_format = resolve_tree_format(config_path)
    except TreeFormatError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if config_path.exists():
        print_info(f"# {config_path}")
    else:
        print_info(f"# {config_path} (not found, showing defaults)")
    print_plain(tomli_w.dumps(tree_format_to_dict(tree_format)).rstrip())


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write the default tree format to the config file."""
    config_path = get_tree_format_path()
    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_tree_format(DEFAULT_TREE_FORMAT, config_path)
    except TreeFormatError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    print_success(f"Wrote tree format to {saved}")
