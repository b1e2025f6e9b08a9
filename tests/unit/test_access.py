"""Unit tests for underbar.access module."""

from dataclasses import dataclass

import pytest

from underbar.absent import ABSENT
from underbar.access import FunctionRef, MethodName, get_property, method_ref
from underbar.errors import InvalidArgumentError, MethodNotFoundError


@dataclass
class Person:
    """Test record with attributes."""

    name: str
    age: int


class TestGetProperty:
    """Tests for get_property()."""

    @staticmethod
    def test_mapping_key() -> None:
        """Mappings are read by key."""
        assert get_property({"name": "moe"}, "name") == "moe"
        assert get_property({1: "one"}, 1) == "one"

    @staticmethod
    def test_mapping_missing_key() -> None:
        """A missing key is ABSENT, an explicit None is kept."""
        assert get_property({"name": "moe"}, "age") is ABSENT
        assert get_property({"age": None}, "age") is None

    @staticmethod
    def test_object_attribute() -> None:
        """Other objects are read by attribute."""
        assert get_property(Person("curly", 60), "age") == 60
        assert get_property(Person("curly", 60), "height") is ABSENT

    @staticmethod
    def test_sequence_index() -> None:
        """Sequences are read by integer index."""
        assert get_property(["a", "b"], 1) == "b"
        assert get_property(["a", "b"], -1) == "b"
        assert get_property(["a", "b"], 5) is ABSENT

    @staticmethod
    def test_non_string_attribute_name() -> None:
        """Non-string names on plain objects are ABSENT."""
        assert get_property(Person("x", 1), 0) is ABSENT


class TestMethodRef:
    """Tests for the MethodName | FunctionRef tagged union."""

    @staticmethod
    def test_string_becomes_method_name() -> None:
        """A string is resolved per element by name."""
        assert method_ref("upper") == MethodName("upper")

    @staticmethod
    def test_callable_becomes_function_ref() -> None:
        """A callable is applied with the element as receiver."""
        assert method_ref(len) == FunctionRef(len)

    @staticmethod
    def test_existing_refs_pass_through() -> None:
        """Already-tagged values are returned unchanged."""
        ref = MethodName("strip")
        assert method_ref(ref) is ref

    @staticmethod
    def test_invalid_method() -> None:
        """Anything else is an InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="method name or callable"):
            method_ref(42)  # type: ignore[arg-type]

    @staticmethod
    def test_method_name_resolves_bound_method() -> None:
        """MethodName binds the method to the element."""
        assert MethodName("upper").resolve("abc")() == "ABC"

    @staticmethod
    def test_method_name_missing_method() -> None:
        """A missing or non-callable attribute raises MethodNotFoundError."""
        with pytest.raises(MethodNotFoundError):
            MethodName("nope").resolve("abc")
        with pytest.raises(MethodNotFoundError):
            MethodName("name").resolve(Person("x", 1))

    @staticmethod
    def test_function_ref_passes_element_first() -> None:
        """FunctionRef calls the function with the element as first argument."""
        assert FunctionRef(pow).resolve(2)(5) == 32
