"""
Table format registry.

Each ``TableFormat`` maps to an immutable ``TableStyle`` describing the
glyphs of its border lines and data rows. Styles are module-level constants
and are never modified.

Example output of the grid format:
    +--------+--------+
    |   name | amount |
    +========+========+
    |  Apple |     15 |
    +--------+--------+
    | Orange |      1 |
    +--------+--------+
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import UnknownFormatError


@dataclass(frozen=True)
class Line:
    """Glyphs of a horizontal border or separator line."""

    begin: str
    fill: str
    sep: str
    end: str


@dataclass(frozen=True)
class RowStyle:
    """Glyphs wrapping and separating the cells of a header or data row."""

    begin: str
    sep: str
    end: str


@dataclass(frozen=True)
class TableStyle:
    """
    Complete description of how a table format is drawn.

    Attributes:
        line_above: Top border, or None
        line_below_header: Line under the header row, or None
        line_between_rows: Line between consecutive data rows, or None
        line_below: Bottom border, or None
        row: Glyphs around and between cells
        padding: Spaces added on each side of every cell
    """

    line_above: Line | None
    line_below_header: Line | None
    line_between_rows: Line | None
    line_below: Line | None
    row: RowStyle
    padding: int = 0

    @property
    def boxed(self) -> bool:
        """True if the style draws a full border around the table."""
        return self.line_above is not None and self.line_below is not None


class TableFormat(Enum):
    """Named table formats."""

    NONE = "none"
    PLAIN = "plain"
    SIMPLE = "simple"
    GRID = "grid"
    FANCY_GRID = "fancy_grid"
    PIPE = "pipe"

    @classmethod
    def parse(cls, value: TableFormat | str) -> TableFormat:
        """
        Resolve a format from a member or its name.

        Names are case-insensitive and accept hyphens, so ``"fancy-grid"``
        and ``"FANCY_GRID"`` both resolve to ``TableFormat.FANCY_GRID``.

        Raises:
            UnknownFormatError: If the name matches no format
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == key:
                    return member
        raise UnknownFormatError(str(value), [member.value for member in cls])

    @property
    def style(self) -> TableStyle:
        return _STYLES[self]


_GRID_ROW = RowStyle("|", "|", "|")
_GRID_LINE = Line("+", "-", "+", "+")
_FANCY_ROW = RowStyle("│", "│", "│")

_STYLES: dict[TableFormat, TableStyle] = {
    TableFormat.NONE: TableStyle(
        line_above=None,
        line_below_header=None,
        line_between_rows=None,
        line_below=None,
        row=RowStyle("", "", ""),
    ),
    TableFormat.PLAIN: TableStyle(
        line_above=None,
        line_below_header=None,
        line_between_rows=None,
        line_below=None,
        row=RowStyle("", " ", ""),
    ),
    TableFormat.SIMPLE: TableStyle(
        line_above=None,
        line_below_header=Line("", "-", " ", ""),
        line_between_rows=None,
        line_below=None,
        row=RowStyle("", " ", ""),
    ),
    TableFormat.GRID: TableStyle(
        line_above=_GRID_LINE,
        line_below_header=Line("+", "=", "+", "+"),
        line_between_rows=_GRID_LINE,
        line_below=_GRID_LINE,
        row=_GRID_ROW,
        padding=1,
    ),
    TableFormat.FANCY_GRID: TableStyle(
        line_above=Line("╒", "═", "╤", "╕"),
        line_below_header=Line("╞", "═", "╪", "╡"),
        line_between_rows=Line("├", "─", "┼", "┤"),
        line_below=Line("╘", "═", "╧", "╛"),
        row=_FANCY_ROW,
        padding=1,
    ),
    TableFormat.PIPE: TableStyle(
        line_above=None,
        line_below_header=Line("", "-", " | ", ""),
        line_between_rows=None,
        line_below=None,
        row=RowStyle("", " | ", ""),
    ),
}


def get_style(fmt: TableFormat | str) -> TableStyle:
    """Look up the style of a format given as a member or a name."""
    return TableFormat.parse(fmt).style
