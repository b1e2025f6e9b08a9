"""Collection shapes.

Operations that accept "a collection" work over a closed variant of two
shapes: ordered sequences and key/value mappings. A collection is classified
once per call into a `CollectionView`, which then offers a uniform way to walk
it, so no operation inspects types element by element.

Text (``str``, ``bytes``, ``bytearray``) is treated as a scalar, never as a
sequence of characters.
"""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from underbar.errors import InvalidArgumentError

TEXT_TYPES = (str, bytes, bytearray)


class Shape(Enum):
    """The two collection shapes."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"


def is_sequence(value: object) -> bool:
    """Return True if *value* is a non-text sequence."""
    return isinstance(value, Sequence) and not isinstance(value, TEXT_TYPES)


def classify(value: object, operation: str) -> Shape:
    """Classify *value* as a sequence or a mapping.

    Args:
        value: The candidate collection.
        operation: Name of the calling operation (for error messages).

    Returns:
        The shape of *value*.

    Raises:
        InvalidArgumentError: If *value* is neither a mapping nor a non-text sequence.
    """
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if is_sequence(value):
        return Shape.SEQUENCE
    raise InvalidArgumentError(
        f"{operation}() expects a sequence or mapping, got {type(value).__name__}"
    )


def require_sequence(value: object, operation: str) -> Sequence[Any]:
    """Return *value* unchanged if it is a non-text sequence.

    Raises:
        InvalidArgumentError: If *value* is a mapping, text, or not a sequence.
    """
    if not is_sequence(value):
        raise InvalidArgumentError(
            f"{operation}() expects a sequence, got {type(value).__name__}"
        )
    return value  # type: ignore[return-value]


def require_mapping(value: object, operation: str) -> Mapping[Any, Any]:
    """Return *value* unchanged if it is a mapping.

    Raises:
        InvalidArgumentError: If *value* is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(
            f"{operation}() expects a mapping, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True, slots=True)
class CollectionView:
    """A collection tagged with its shape."""

    shape: Shape
    data: Any

    def __len__(self) -> int:
        return len(self.data)

    def pairs(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(index, value)`` for sequences and ``(key, value)`` for mappings."""
        match self.shape:
            case Shape.SEQUENCE:
                return enumerate(self.data)
            case Shape.MAPPING:
                return iter(self.data.items())

    def values(self) -> Iterator[Any]:
        """Yield the elements of a sequence or the values of a mapping."""
        match self.shape:
            case Shape.SEQUENCE:
                return iter(self.data)
            case Shape.MAPPING:
                return iter(self.data.values())


def view(value: object, operation: str) -> CollectionView:
    """Classify *value* and wrap it in a `CollectionView`."""
    return CollectionView(classify(value, operation), value)
