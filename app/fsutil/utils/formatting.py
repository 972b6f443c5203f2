"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_THEME = Theme(
    {
        "success": "#03b971",
        "error": "bold #f53263",
        "info": "#0ec1c8",
    }
)

# Shared console instances
console = Console(theme=_THEME)
err_console = Console(theme=_THEME, stderr=True)


def print_plain(line: str) -> None:
    """Print a line verbatim: no markup, emoji, highlighting or wrapping."""
    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_paths(paths: Iterable[Path]) -> None:
    """Print one path per line."""
    for path in paths:
        print_plain(str(path))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
