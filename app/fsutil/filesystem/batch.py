"""Batch success aggregation shared by every multi-path operation."""

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def do_all(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Apply a predicate to every item and AND the results.

    Every item is visited, even after a failure, so a failed delete does
    not prevent attempts on the remaining paths. Exceptions raised by the
    predicate are not caught.

    Args:
        items: Items to process, in order.
        predicate: Per-item operation returning True on success.

    Returns:
        True if every call returned True (or there were no items).
    """
    success = True
    for item in items:
        success = predicate(item) and success
    return success
