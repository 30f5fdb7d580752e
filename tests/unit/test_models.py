"""Tests for layout and table models."""

import dataclasses

import pytest

from recordtab.cells import Alignment
from recordtab.exceptions import UnknownFormatError
from recordtab.formats import TableFormat
from recordtab.models import Layout, Table


class TestLayout:
    """Tests for Layout."""

    def test_defaults(self) -> None:
        layout = Layout()
        assert layout.format is TableFormat.SIMPLE
        assert layout.headers is None
        assert layout.hide_headers is False
        assert layout.text_align is Alignment.RIGHT

    def test_format_name_coerced(self) -> None:
        """String format names become members."""
        layout = Layout(format="grid")
        assert layout.format is TableFormat.GRID
        assert layout.table_format is TableFormat.GRID
        assert layout.style is TableFormat.GRID.style

    def test_unknown_format(self) -> None:
        with pytest.raises(UnknownFormatError):
            Layout(format="html")

    def test_headers_copied_to_tuple(self) -> None:
        """Headers are frozen so later edits to the caller's list don't leak in."""
        labels = ["a", "b"]
        layout = Layout(headers=labels)
        labels.append("c")
        assert layout.headers == ("a", "b")

    def test_headers_stringified(self) -> None:
        assert Layout(headers=[1, 2]).headers == ("1", "2")  # type: ignore[list-item]

    def test_headers_string_rejected(self) -> None:
        """A bare string is not a list of labels."""
        with pytest.raises(ValueError, match="not a string"):
            Layout(headers="ab")

    def test_text_align_name_coerced(self) -> None:
        """Text alignment accepts its name, like the format does."""
        layout = Layout(text_align="Left")
        assert layout.text_align is Alignment.LEFT
        assert layout.text_alignment is Alignment.LEFT

    @pytest.mark.parametrize("value", ["middle", None, 3])
    def test_unknown_text_align_rejected(self, value) -> None:
        with pytest.raises(ValueError, match="Unknown text_align"):
            Layout(text_align=value)

    def test_decimal_text_align_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="LEFT or RIGHT"):
            Layout(text_align="decimal")

    def test_decimal_text_align_rejected(self) -> None:
        with pytest.raises(ValueError, match="text_align"):
            Layout(text_align=Alignment.DECIMAL)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Layout().hide_headers = True  # type: ignore[misc]

    def test_equal_layouts(self) -> None:
        assert Layout(format="pipe", headers=["x"]) == Layout(
            format=TableFormat.PIPE, headers=("x",)
        )


class TestTable:
    """Tests for Table."""

    def test_text(self) -> None:
        """Every line is newline-terminated, the last included."""
        table = Table(("a", "b"))
        assert table.text == "a\nb\n"
        assert str(table) == "a\nb\n"

    def test_sequence_behaviour(self) -> None:
        table = Table(("a", "b"))
        assert len(table) == 2
        assert list(table) == ["a", "b"]

    def test_empty(self) -> None:
        assert Table(()).text == ""
