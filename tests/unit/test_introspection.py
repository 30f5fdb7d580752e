"""Tests for record introspection."""

from collections import OrderedDict, namedtuple
from dataclasses import dataclass

import pytest

from recordtab.exceptions import (
    EmptyInputError,
    InconsistentRecordError,
    InconsistentRowLengthError,
    UnsupportedTypeError,
)
from recordtab.introspection import AttributeIntrospector, extract, is_matrix_row


@dataclass
class Item:
    name: str
    count: int


class Slotted:
    __slots__ = ("name", "count", "_hidden")

    def __init__(self, name: str, count: int) -> None:
        self.name = name
        self.count = count
        self._hidden = True


class Plain:
    def __init__(self, name: str, count: int) -> None:
        self.name = name
        self.count = count
        self._cache = {}


Pair = namedtuple("Pair", ["name", "count"])


class TestAttributeIntrospector:
    """Tests for AttributeIntrospector."""

    @pytest.mark.parametrize(
        "record",
        [
            Item("a", 1),
            Pair("a", 1),
            {"name": "a", "count": 1},
            OrderedDict([("name", "a"), ("count", 1)]),
            Slotted("a", 1),
            Plain("a", 1),
        ],
    )
    def test_record_shapes(self, record) -> None:
        """Every supported shape yields fields in declaration order."""
        assert AttributeIntrospector().fields(record) == [("name", "a"), ("count", 1)]

    def test_mapping_keys_stringified(self) -> None:
        assert AttributeIntrospector().fields({1: "x"}) == [("1", "x")]

    def test_unset_slots_skipped(self) -> None:
        record = Slotted.__new__(Slotted)
        record.name = "a"
        assert AttributeIntrospector().fields(record) == [("name", "a")]

    def test_no_fields(self) -> None:
        """Values without attributes can't be records."""
        with pytest.raises(UnsupportedTypeError, match="no readable fields"):
            AttributeIntrospector().fields(42)


class TestIsMatrixRow:
    """Test is_matrix_row function."""

    def test_list_and_tuple(self) -> None:
        assert is_matrix_row(["a"])
        assert is_matrix_row(("a",))

    def test_named_tuple_is_record(self) -> None:
        assert not is_matrix_row(Pair("a", 1))

    def test_string_is_not_row(self) -> None:
        assert not is_matrix_row("ab")


class TestExtract:
    """Test extract function."""

    def test_records(self) -> None:
        headers, rows = extract([Item("a", 1), Item("b", 2)])
        assert headers == ["name", "count"]
        assert rows == [["a", 1], ["b", 2]]

    def test_matrix(self) -> None:
        """Matrices have no derived headers."""
        headers, rows = extract([("a", 1), ["b", 2]])
        assert headers is None
        assert rows == [["a", 1], ["b", 2]]

    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError):
            extract([])

    def test_empty_rows(self) -> None:
        with pytest.raises(EmptyInputError, match="no cells"):
            extract([[], []])

    def test_records_without_fields(self) -> None:
        with pytest.raises(EmptyInputError, match="no fields"):
            extract([{}, {}])

    def test_ragged_matrix(self) -> None:
        with pytest.raises(InconsistentRowLengthError) as exc_info:
            extract([["a", "b"], ["c", "d"], ["e", "f", "g"]])
        assert exc_info.value.row == 2
        assert exc_info.value.actual == 3

    def test_matrix_with_record_row(self) -> None:
        """A matrix can't switch to records half way."""
        with pytest.raises(UnsupportedTypeError) as exc_info:
            extract([["a", 1], Item("b", 2)])
        assert exc_info.value.row == 1

    def test_mismatched_records(self) -> None:
        with pytest.raises(InconsistentRecordError) as exc_info:
            extract([Item("a", 1), Pair("b", 2), {"name": "c"}])
        assert exc_info.value.row == 2
        assert exc_info.value.expected == ["name", "count"]
        assert exc_info.value.actual == ["name"]
