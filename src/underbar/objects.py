"""Non-mutating merges of mappings."""

from collections.abc import Mapping
from typing import Any

from underbar.shapes import require_mapping


def extend(target: Mapping[Any, Any], *sources: Mapping[Any, Any]) -> dict[Any, Any]:
    """Return a new dict of *target* overlaid by each source in turn.

    Keys from later sources replace earlier ones. No argument is modified.

    Raises:
        InvalidArgumentError: If any argument is not a mapping.
    """
    merged = dict(require_mapping(target, "extend"))
    for source in sources:
        merged.update(require_mapping(source, "extend"))
    return merged


def defaults(target: Mapping[Any, Any], *sources: Mapping[Any, Any]) -> dict[Any, Any]:
    """Return a new dict of *target* with missing keys filled from the sources.

    Keys already present (from *target* or an earlier source) are never
    replaced. No argument is modified.

    Raises:
        InvalidArgumentError: If any argument is not a mapping.
    """
    merged = dict(require_mapping(target, "defaults"))
    for source in sources:
        for key, value in require_mapping(source, "defaults").items():
            merged.setdefault(key, value)
    return merged
