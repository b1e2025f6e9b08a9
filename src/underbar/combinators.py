"""Combinators over several sequences or nested sequences."""

from collections.abc import Sequence
from itertools import chain, zip_longest
from typing import Any, TypeVar

from underbar.absent import ABSENT
from underbar.equality import StrictSet
from underbar.iteration import uniq
from underbar.shapes import is_sequence, require_sequence

T = TypeVar("T")


def zip_(*seqs: Sequence[Any]) -> list[tuple[Any, ...]]:
    """Group the elements of several sequences by position.

    The result is as long as the longest input; shorter inputs contribute
    ``ABSENT`` at missing positions.

    Example:
        ``zip_(["a", "b"], [1])`` returns ``[("a", 1), ("b", ABSENT)]``.
    """
    columns = [require_sequence(seq, "zip_") for seq in seqs]
    return list(zip_longest(*columns, fillvalue=ABSENT))


def flatten(nested: Sequence[Any], shallow: bool = False) -> list[Any]:
    """Flatten nested sequences into a single list.

    Leaves are collected depth-first, left to right. Text values are leaves.
    Nesting depth is bounded only by memory; cyclic structures never terminate.

    Args:
        nested: A sequence whose elements may themselves be sequences.
        shallow: When True, remove a single level of nesting only.

    Returns:
        A new flat list.
    """
    items = require_sequence(nested, "flatten")
    result: list[Any] = []
    if shallow:
        for item in items:
            if is_sequence(item):
                result.extend(item)
            else:
                result.append(item)
        return result

    # explicit stack of iterators instead of recursion
    stack = [iter(items)]
    while stack:
        for item in stack[-1]:
            if is_sequence(item):
                stack.append(iter(item))
                break
            result.append(item)
        else:
            stack.pop()
    return result


def intersection(*seqs: Sequence[T]) -> list[T]:
    """Return the distinct elements present in every input sequence.

    Order follows first occurrence in the first sequence. Membership uses
    strict equality.
    """
    if not seqs:
        return []
    head, *rest = seqs
    others = [StrictSet(require_sequence(seq, "intersection")) for seq in rest]
    return [
        item
        for item in uniq(require_sequence(head, "intersection"))
        if all(item in other for other in others)
    ]


def difference(seq: Sequence[T], *others: Sequence[Any]) -> list[T]:
    """Return the distinct elements of *seq* that appear in none of *others*."""
    excluded = StrictSet(
        chain.from_iterable(require_sequence(other, "difference") for other in others)
    )
    return [item for item in uniq(require_sequence(seq, "difference")) if item not in excluded]
