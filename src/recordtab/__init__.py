"""
recordtab: render uniform records as aligned text tables.

This library provides:
- Six table formats (none, plain, simple, grid, fancy_grid, pipe)
- Typed cell formatting (numbers right-aligned, floats on the decimal point)
- Field discovery for dataclasses, named tuples, mappings and objects
- Display-width aware padding for wide characters and box-drawing glyphs

Example:
    from dataclasses import dataclass

    from recordtab import Layout, TableFormat, tabulate

    @dataclass
    class Produce:
        name: str
        amount: int

    print(tabulate([Produce("Apple", 15), Produce("Orange", 1)]))
    #   name amount
    # ------ ------
    #  Apple     15
    # Orange      1

    print(tabulate(records, Layout(format=TableFormat.GRID)))
"""

from .cells import Alignment, Cell, CellKind, format_value
from .columns import Column, analyze_column, display_width
from .exceptions import (
    EmptyInputError,
    HeaderCountMismatchError,
    InconsistentRecordError,
    InconsistentRowLengthError,
    InputError,
    LayoutError,
    RecordTabError,
    UnknownFormatError,
    UnsupportedTypeError,
)
from .formats import Line, RowStyle, TableFormat, TableStyle, get_style
from .introspection import AttributeIntrospector, RecordIntrospector
from .models import Layout, Table
from .rows import pad, render_line, render_row
from .table import build_table, tabulate

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main API
    "tabulate",
    "build_table",
    "Layout",
    "Table",
    "TableFormat",
    # Layout engine
    "Alignment",
    "Cell",
    "CellKind",
    "Column",
    "Line",
    "RowStyle",
    "TableStyle",
    "analyze_column",
    "display_width",
    "format_value",
    "get_style",
    "pad",
    "render_line",
    "render_row",
    # Introspection
    "AttributeIntrospector",
    "RecordIntrospector",
    # Exceptions
    "RecordTabError",
    "LayoutError",
    "InputError",
    "UnsupportedTypeError",
    "HeaderCountMismatchError",
    "UnknownFormatError",
    "EmptyInputError",
    "InconsistentRowLengthError",
    "InconsistentRecordError",
]
