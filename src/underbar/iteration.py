"""Single-pass iteration and query primitives."""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from underbar.access import MethodRef, get_property, method_ref
from underbar.equality import StrictSet, strictly_equal
from underbar.shapes import require_sequence, view

T = TypeVar("T")
R = TypeVar("R")

type Predicate = Callable[[Any], object]


def each(collection: Any, func: Callable[[Any, Any, Any], object]) -> None:
    """Call ``func(value, key_or_index, collection)`` for every element.

    Sequences pass the element index as the second argument; mappings pass the
    key. Return values of *func* are ignored.

    Raises:
        InvalidArgumentError: If *collection* is neither a sequence nor a mapping.
    """
    for key, value in view(collection, "each").pairs():
        func(value, key, collection)


def map_(seq: Sequence[T], func: Callable[[T], R]) -> list[R]:
    """Return a new list of ``func(element)`` for each element of *seq*."""
    return [func(item) for item in require_sequence(seq, "map_")]


def filter_(seq: Sequence[T], predicate: Predicate) -> list[T]:
    """Return the elements of *seq* for which *predicate* is truthy."""
    return [item for item in require_sequence(seq, "filter_") if predicate(item)]


def reject(seq: Sequence[T], predicate: Predicate) -> list[T]:
    """Return the elements of *seq* for which *predicate* is falsy."""
    return [item for item in require_sequence(seq, "reject") if not predicate(item)]


def every(collection: Any, predicate: Predicate | None = None) -> bool:
    """Return True if every element (or mapping value) passes *predicate*.

    Without a predicate, the truthiness of each element is used. An empty
    collection yields True.
    """
    values = view(collection, "every").values()
    if predicate is None:
        return all(values)
    return all(predicate(value) for value in values)


def some(collection: Any, predicate: Predicate | None = None) -> bool:
    """Return True if at least one element (or mapping value) passes *predicate*.

    Without a predicate, the truthiness of each element is used. An empty
    collection yields False.
    """
    values = view(collection, "some").values()
    if predicate is None:
        return any(values)
    return any(predicate(value) for value in values)


def contains(collection: Any, target: object) -> bool:
    """Return True if some element (or mapping value) is strictly equal to *target*."""
    return any(
        strictly_equal(value, target) for value in view(collection, "contains").values()
    )


def index_of(seq: Sequence[Any], target: object) -> int:
    """Return the first index holding a value strictly equal to *target*, or -1."""
    for index, item in enumerate(require_sequence(seq, "index_of")):
        if strictly_equal(item, target):
            return index
    return -1


def uniq(seq: Sequence[T]) -> list[T]:
    """Return *seq* without strict duplicates, keeping first occurrences in order."""
    seen = StrictSet()
    result: list[T] = []
    for item in require_sequence(seq, "uniq"):
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def pluck(records: Sequence[Any], name: Any) -> list[Any]:
    """Return the *name* property of each record.

    Mapping records are looked up by key, sequence records by index and other
    objects by attribute. Records lacking the property contribute ``ABSENT``.
    """
    return [get_property(record, name) for record in require_sequence(records, "pluck")]


def invoke(
    seq: Sequence[Any],
    method: str | Callable[..., Any] | MethodRef,
    *args: Any,
    **kwargs: Any,
) -> list[Any]:
    """Call a method on every element and collect the results.

    Args:
        seq: The elements to call the method on.
        method: Either the name of a method, resolved on each element when it
            is reached, or a function called with the element as its first
            argument.
        *args: Positional arguments passed to every call.
        **kwargs: Keyword arguments passed to every call.

    Returns:
        The call results, in input order.

    Raises:
        InvalidArgumentError: If *method* is neither a name nor callable.
        MethodNotFoundError: If a named method is missing on an element.
    """
    ref = method_ref(method)
    return [ref.resolve(item)(*args, **kwargs) for item in require_sequence(seq, "invoke")]
