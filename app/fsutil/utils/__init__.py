"""Utility modules for fsutil.

This module exports commonly used utility functions.
"""

from fsutil.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_paths,
    print_plain,
    print_success,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_paths",
    "print_plain",
    "print_success",
]
