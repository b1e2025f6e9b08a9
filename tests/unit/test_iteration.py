"""Unit tests for underbar.iteration module."""

from dataclasses import dataclass

import pytest

from underbar.absent import ABSENT
from underbar.errors import InvalidArgumentError, MethodNotFoundError
from underbar.iteration import (
    contains,
    each,
    every,
    filter_,
    index_of,
    invoke,
    map_,
    pluck,
    reject,
    some,
    uniq,
)

# pylint: disable=missing-class-docstring


def is_even(n: int) -> bool:
    """Predicate used across tests."""
    return n % 2 == 0


# --- each ---------------------------------------------------------------------


def test_each_over_sequence_passes_value_index_collection():
    """each() calls f(value, index, collection) in order."""
    data = ["a", "b"]
    calls = []
    assert each(data, lambda *args: calls.append(args)) is None
    assert calls == [("a", 0, data), ("b", 1, data)]


def test_each_over_mapping_passes_value_key_collection():
    """each() calls f(value, key, mapping) for every pair."""
    data = {"x": 1, "y": 2}
    calls = []
    each(data, lambda *args: calls.append(args))
    assert calls == [(1, "x", data), (2, "y", data)]


def test_each_rejects_non_collection():
    """each() needs a sequence or mapping."""
    with pytest.raises(InvalidArgumentError):
        each(42, print)


# --- map_ / filter_ / reject ---------------------------------------------------


def test_map_preserves_length_and_order():
    """map_() applies f to every element."""
    assert map_([1, 2, 3], lambda n: n * 10) == [10, 20, 30]
    assert map_((), str) == []


def test_filter_and_reject_partition():
    """filter_() keeps passing elements, reject() the others."""
    data = [1, 2, 3, 4, 5, 6]
    assert filter_(data, is_even) == [2, 4, 6]
    assert reject(data, is_even) == [1, 3, 5]


def test_filter_uses_predicate_truthiness():
    """Non-bool predicate results count by truthiness."""
    assert filter_(["", "a", None, "b"], lambda s: s) == ["a", "b"]


def test_map_rejects_mapping():
    """map_() is sequence-only."""
    with pytest.raises(InvalidArgumentError, match=r"map_\(\) expects a sequence"):
        map_({"a": 1}, str)


# --- every / some ---------------------------------------------------------------


@pytest.mark.parametrize(
    "collection, expected",
    [([], True), ([2, 4], True), ([2, 3], False), ({"a": 2, "b": 4}, True), ({"a": 1}, False)],
)
def test_every(collection, expected):
    """every() checks all elements or mapping values."""
    assert every(collection, is_even) is expected


@pytest.mark.parametrize(
    "collection, expected",
    [([], False), ([1, 3], False), ([1, 2], True), ({"a": 1, "b": 2}, True), ({}, False)],
)
def test_some(collection, expected):
    """some() checks any element or mapping value."""
    assert some(collection, is_even) is expected


def test_every_and_some_default_to_truthiness():
    """Without a predicate, element truthiness is used."""
    assert every([1, "a", True])
    assert not every([1, 0, True])
    assert some([0, "", "x"])
    assert not some([0, "", None])
    assert every({"a": 1}) and not some({"a": 0})


def test_every_stops_at_first_failure():
    """every() short-circuits."""
    seen = []

    def check(n):
        seen.append(n)
        return n < 2

    assert not every([1, 2, 3], check)
    assert seen == [1, 2]


# --- contains / index_of ----------------------------------------------------------


def test_contains_sequence_and_mapping():
    """contains() looks at elements or mapping values."""
    assert contains([1, 2, 3], 3)
    assert not contains([1, 2, 3], 4)
    assert contains({"a": "x"}, "x")
    assert not contains({"x": 1}, "x")


def test_contains_is_strict():
    """contains() does not coerce types."""
    assert not contains([1, 2], True)
    assert not contains(["1"], 1)
    assert not contains([1], 1.0)


def test_index_of():
    """index_of() returns the first strictly equal position or -1."""
    assert index_of([10, 20, 10], 10) == 0
    assert index_of([10, 20, 10], 20) == 1
    assert index_of([10, 20], 30) == -1
    assert index_of([1.0, 1], 1) == 1


# --- uniq ---------------------------------------------------------------------


def test_uniq_keeps_first_occurrences():
    """uniq() drops later duplicates."""
    assert uniq([1, 2, 1, 3, 1, 4]) == [1, 2, 3, 4]


def test_uniq_is_strict():
    """uniq() treats 1, 1.0 and True as distinct."""
    assert uniq([1, 1.0, True, 1]) == [1, 1.0, True]


def test_uniq_is_strict_inside_containers():
    """Nested 1, 1.0 and True also stay distinct."""
    assert uniq([(1,), (True,), (1.0,), (1,)]) == [(1,), (True,), (1.0,)]
    assert uniq([[1], [True], [1]]) == [[1], [True]]


def test_contains_and_index_of_are_strict_inside_containers():
    """Lookups compare container elements strictly."""
    assert not contains([(1,)], (True,))
    assert index_of([(1.0,), (1,)], (1,)) == 1


def test_uniq_handles_unhashable_values():
    """uniq() works with lists and dicts as elements."""
    assert uniq([[1], [1], {"a": 1}, {"a": 1}, [2]]) == [[1], {"a": 1}, [2]]


def test_uniq_does_not_mutate_input():
    """uniq() builds a new list."""
    data = [1, 1]
    assert uniq(data) == [1]
    assert data == [1, 1]


# --- pluck --------------------------------------------------------------------


@dataclass
class Stooge:
    name: str
    age: int


def test_pluck_from_dicts():
    """pluck() reads a key from each mapping."""
    people = [{"name": "moe", "age": 30}, {"name": "curly", "age": 50}]
    assert pluck(people, "age") == [30, 50]


def test_pluck_missing_is_absent():
    """Records without the property contribute ABSENT."""
    assert pluck([{"a": 1}, {"b": 2}], "a") == [1, ABSENT]


def test_pluck_from_objects_and_sequences():
    """pluck() reads attributes of objects and indexes of sequences."""
    assert pluck([Stooge("larry", 40)], "name") == ["larry"]
    assert pluck([[1, 2], [3, 4]], 1) == [2, 4]


# --- invoke -------------------------------------------------------------------


def test_invoke_by_method_name():
    """A method name is resolved on every element."""
    assert invoke(["a", "b"], "upper") == ["A", "B"]


def test_invoke_by_method_name_with_args():
    """Extra arguments are passed to every call."""
    assert invoke(["a-b", "c-d"], "split", "-") == [["a", "b"], ["c", "d"]]
    assert invoke([[3, 1, 2], [2, 1]], lambda seq, reverse: sorted(seq, reverse=reverse), reverse=True) == [
        [3, 2, 1],
        [2, 1],
    ]


def test_invoke_by_callable_receives_element_first():
    """A callable gets the element as its receiver."""
    assert invoke([1, 2, 3], pow, 2) == [1, 4, 9]


def test_invoke_missing_method_raises():
    """A method missing on an element raises MethodNotFoundError."""
    with pytest.raises(MethodNotFoundError, match="'int' element has no callable method 'upper'"):
        invoke(["a", 1], "upper")


def test_invoke_invalid_method():
    """method must be a name or a callable."""
    with pytest.raises(InvalidArgumentError):
        invoke([1], 3)  # type: ignore[arg-type]
