"""
Cell formatting.

Converts a single typed value into its canonical text and the alignment
its column should use:

- bool: ``true``/``false``, right-aligned
- integers: decimal text, right-aligned
- floats: shortest round-trip text, aligned on the decimal point
- strings and objects with their own ``__str__``: the text itself
- None: empty text, fits any column
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import UnsupportedTypeError


class Alignment(Enum):
    """Horizontal alignment of a column."""

    LEFT = "left"
    RIGHT = "right"
    DECIMAL = "decimal"


class CellKind(Enum):
    """Value category of a formatted cell."""

    EMPTY = "empty"
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"

    @property
    def is_numeric(self) -> bool:
        return self in (CellKind.INTEGER, CellKind.FLOAT)


@dataclass(frozen=True)
class Cell:
    """
    A value rendered to text.

    Attributes:
        text: Canonical text of the value
        alignment: Alignment the value asks its column for
        kind: Value category, used to keep columns uniform
    """

    text: str
    alignment: Alignment
    kind: CellKind


EMPTY_CELL = Cell("", Alignment.RIGHT, CellKind.EMPTY)


def format_float(value: float) -> str:
    """
    Shortest text that round-trips to ``value``.

    Whole numbers drop the trailing ``.0``:

        >>> format_float(1.0)
        '1'
        >>> format_float(11.0000000000001)
        '11.0000000000001'
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def is_stringer(value: Any) -> bool:
    """True if the value's type defines its own ``__str__``."""
    return type(value).__str__ is not object.__str__


def format_value(value: Any, text_align: Alignment = Alignment.RIGHT) -> Cell:
    """
    Format one value as a cell.

    Args:
        value: The value to format
        text_align: Alignment for strings and stringers

    Returns:
        The formatted cell

    Raises:
        UnsupportedTypeError: If the value has no text representation
    """
    if value is None:
        return EMPTY_CELL

    # bool is an Integral, so it goes first
    if isinstance(value, bool):
        return Cell("true" if value else "false", Alignment.RIGHT, CellKind.BOOLEAN)

    if isinstance(value, numbers.Integral):
        return Cell(str(int(value)), Alignment.RIGHT, CellKind.INTEGER)

    if isinstance(value, float):
        return Cell(format_float(value), Alignment.DECIMAL, CellKind.FLOAT)

    if isinstance(value, str):
        return Cell(value, text_align, CellKind.TEXT)

    if isinstance(value, (bytes, bytearray, memoryview)):
        raise UnsupportedTypeError(value, reason="decode binary data before tabulating")

    if is_stringer(value):
        try:
            text = str(value)
        except TypeError as e:
            raise UnsupportedTypeError(value, reason=str(e)) from e
        return Cell(text, text_align, CellKind.TEXT)

    raise UnsupportedTypeError(value)
