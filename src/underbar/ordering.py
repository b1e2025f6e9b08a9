"""Reduction and ordering."""

import random
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from underbar import config
from underbar.absent import ABSENT
from underbar.access import get_property
from underbar.errors import EmptyReductionError, InvalidArgumentError
from underbar.shapes import require_sequence, view

T = TypeVar("T")


def reduce_(collection: Any, func: Callable[[Any, Any], Any], initial: Any = ABSENT) -> Any:
    """Fold *collection* from left to right with ``func(accumulator, element)``.

    Mappings are folded over their values.

    Args:
        collection: A sequence or mapping.
        func: Combines the accumulator with the next element.
        initial: Seed for the accumulator. When omitted, the first element is
            the seed and folding starts from the second one. ``None`` is a
            valid seed.

    Returns:
        The final accumulator.

    Raises:
        InvalidArgumentError: If *collection* is neither a sequence nor a mapping.
        EmptyReductionError: If *collection* is empty and no *initial* is given.
    """
    values = view(collection, "reduce_").values()
    accumulator = initial
    if accumulator is ABSENT:
        try:
            accumulator = next(values)
        except StopIteration:
            raise EmptyReductionError() from None
    for value in values:
        accumulator = func(accumulator, value)
    return accumulator


def _key_function(criterion: Any) -> Callable[[Any], Any]:
    if criterion is None:
        return lambda item: item
    if callable(criterion):
        return criterion
    return lambda item: get_property(item, criterion)


def sort_by(seq: Sequence[T], criterion: Any = None) -> list[T]:
    """Return a new list sorted ascending by a computed key.

    The sort is stable. Elements whose key is ``ABSENT`` or ``None`` are moved
    to the end, keeping their input order.

    Args:
        seq: The sequence to sort; it is not modified.
        criterion: A function computing the key of an element, or the name of
            the key/attribute (or index) to read from each element. When
            omitted, elements are compared directly.

    Returns:
        The sorted elements.

    Raises:
        InvalidArgumentError: If *seq* is not a sequence or two keys cannot be
            compared with each other.
    """
    key_of = _key_function(criterion)
    keyed: list[tuple[Any, T]] = []
    missing: list[T] = []
    for item in require_sequence(seq, "sort_by"):
        key = key_of(item)
        if key is ABSENT or key is None:
            missing.append(item)
        else:
            keyed.append((key, item))
    try:
        keyed.sort(key=lambda pair: pair[0])
    except TypeError as e:
        raise InvalidArgumentError(f"sort_by() keys are not comparable: {e}") from e
    return [item for _, item in keyed] + missing


def _default_rng() -> random.Random:
    if (seed := config.get_shuffle_seed()) is not None:
        return random.Random(seed)
    return random.Random()


def shuffle(seq: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly random permutation of *seq* as a new list.

    Uses the Fisher-Yates algorithm on a copy. When *rng* is omitted, a
    generator seeded from ``UNDERBAR_SHUFFLE_SEED`` is used if that variable is
    set, otherwise a freshly seeded generator.
    """
    result = list(require_sequence(seq, "shuffle"))
    rng = rng if rng is not None else _default_rng()
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
