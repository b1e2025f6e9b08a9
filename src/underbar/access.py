"""Property and method access on collection elements.

`invoke` accepts either a method name, resolved on each element at call time,
or a function applied to each element as its receiver. The two cases are
modelled as a small tagged union (`MethodName` | `FunctionRef`), built once
per call by `method_ref`.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any

from underbar.absent import ABSENT, Maybe
from underbar.errors import InvalidArgumentError, MethodNotFoundError
from underbar.shapes import is_sequence


def get_property(record: object, name: Any) -> Maybe[Any]:
    """Look up *name* on *record*, returning ``ABSENT`` when it is missing.

    Mappings are looked up by key, sequences by integer index, and any other
    object by attribute.
    """
    if isinstance(record, Mapping):
        return record.get(name, ABSENT)
    if is_sequence(record) and isinstance(name, int) and not isinstance(name, bool):
        try:
            return record[name]  # type: ignore[index]
        except IndexError:
            return ABSENT
    if isinstance(name, str):
        return getattr(record, name, ABSENT)
    return ABSENT


@dataclass(frozen=True, slots=True)
class MethodName:
    """A method to resolve by name on each element."""

    name: str

    def resolve(self, element: object) -> Callable[..., Any]:
        """Return the method bound to *element*.

        Raises:
            MethodNotFoundError: If *element* has no callable attribute `name`.
        """
        method = getattr(element, self.name, ABSENT)
        if not callable(method):
            raise MethodNotFoundError(self.name, element)
        return method


@dataclass(frozen=True, slots=True)
class FunctionRef:
    """A function called with each element as its first argument."""

    func: Callable[..., Any]

    def resolve(self, element: object) -> Callable[..., Any]:
        """Return `func` with *element* bound as the receiver."""
        return partial(self.func, element)


type MethodRef = MethodName | FunctionRef


def method_ref(method: str | Callable[..., Any] | MethodRef) -> MethodRef:
    """Convert *method* into a `MethodName` or `FunctionRef`.

    Raises:
        InvalidArgumentError: If *method* is neither a string nor callable.
    """
    match method:
        case MethodName() | FunctionRef():
            return method
        case str():
            return MethodName(method)
        case _ if callable(method):
            return FunctionRef(method)
        case _:
            raise InvalidArgumentError(
                f"invoke() expects a method name or callable, got {type(method).__name__}"
            )
