"""Strict equality.

Two values are strictly equal when they are the same object, or when they have
exactly the same type and compare equal. There is no cross-type coercion:
``1``, ``1.0`` and ``True`` are three distinct values, also when nested inside
tuples, lists, frozensets or mapping values.
"""

from collections.abc import Hashable, Iterable, Mapping
from typing import Any


def strictly_equal(a: object, b: object) -> bool:
    """Return True if *a* and *b* are strictly equal."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    match a:
        case tuple() | list():
            return len(a) == len(b) and all(  # type: ignore[arg-type]
                strictly_equal(x, y) for x, y in zip(a, b)  # type: ignore[call-overload]
            )
        case frozenset() | set():
            try:
                return strict_key(frozenset(a)) == strict_key(frozenset(b))  # type: ignore[arg-type]
            except TypeError:
                return False
        case Mapping():
            return a.keys() == b.keys() and all(  # type: ignore[attr-defined]
                strictly_equal(a[k], b[k]) for k in a  # type: ignore[index]
            )
    return a == b


def strict_key(value: object) -> Hashable:
    """Return a hashable key equal for strictly equal values only.

    Tuples and frozensets are keyed element by element, so ``(1,)`` and
    ``(True,)`` get different keys.

    Raises:
        TypeError: If *value* (or an element of it) is unhashable.
    """
    match value:
        case tuple():
            key: Hashable = (type(value), tuple(strict_key(item) for item in value))
        case frozenset():
            key = (type(value), frozenset(strict_key(item) for item in value))
        case _:
            key = (type(value), value)
    hash(key)
    return key


class StrictSet:
    """Membership set using strict equality.

    Hashable values are stored by `strict_key` for constant-time lookups;
    unhashable values fall back to a linear scan.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._hashed: set[Hashable] = set()
        self._unhashable: list[Any] = []
        for value in values:
            self.add(value)

    def __contains__(self, value: object) -> bool:
        try:
            return strict_key(value) in self._hashed
        except TypeError:
            return any(strictly_equal(value, item) for item in self._unhashable)

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashable)

    def add(self, value: Any) -> None:
        """Add *value* unless a strictly equal value is already present."""
        try:
            self._hashed.add(strict_key(value))
        except TypeError:
            if value not in self:
                self._unhashable.append(value)
