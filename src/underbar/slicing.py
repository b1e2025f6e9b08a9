"""Head and tail slicing of sequences."""

from collections.abc import Sequence
from typing import Any

from underbar.absent import ABSENT
from underbar.errors import InvalidArgumentError
from underbar.shapes import require_sequence


def _check_count(n: object, operation: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(
            f"{operation}() count must be an int, got {type(n).__name__}"
        )
    return n


def first(seq: Sequence[Any], n: int | None = None) -> Any:
    """Return the first element, or a list of the first *n* elements.

    Args:
        seq: The sequence to slice.
        n: How many leading elements to take. When omitted, the single first
            element is returned instead of a list.

    Returns:
        Without *n*: ``seq[0]``, or ``ABSENT`` if *seq* is empty.
        With *n*: a new list of ``min(n, len(seq))`` leading elements, or an
        empty list when ``n <= 0``.

    Raises:
        InvalidArgumentError: If *seq* is not a sequence or *n* is not an int.
    """
    items = require_sequence(seq, "first")
    if n is None:
        return items[0] if len(items) else ABSENT
    count = _check_count(n, "first")
    if count <= 0:
        return []
    return list(items)[:count]


def last(seq: Sequence[Any], n: int | None = None) -> Any:
    """Return the last element, or a list of the last *n* elements.

    Mirror image of `first`; the returned slice keeps left-to-right order.
    """
    items = require_sequence(seq, "last")
    if n is None:
        return items[-1] if len(items) else ABSENT
    count = _check_count(n, "last")
    if count <= 0:
        return []
    copy = list(items)
    return copy[max(len(copy) - count, 0) :]
