"""The ``ABSENT`` sentinel.

``ABSENT`` marks "no value present" in results: the head of an empty sequence,
a missing property picked by `pluck`, or the padding `zip_` uses for short
inputs. It is distinct from ``None`` so that ``None`` remains an ordinary
element value.
"""

from dataclasses import dataclass
from typing import TypeGuard


def _get_absent() -> "_AbsentType":
    # Factory used by pickle to retrieve the one true instance.
    return ABSENT


@dataclass(frozen=True)
class _AbsentType:
    """Sentinel denoting that no value is present."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_absent, ())


# Singleton instance
ABSENT = _AbsentType()

type Maybe[T] = T | _AbsentType


def is_absent(value: object) -> TypeGuard[_AbsentType]:
    """Return True if *value* is the ``ABSENT`` sentinel."""
    return value is ABSENT
