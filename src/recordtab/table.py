"""
Table assembly.

Ties the pieces together: records are split into headers and values, every
value is formatted, every column analysed, and the rows and border lines of
the selected format are emitted in order:

    line above          (boxed formats)
    header row          (unless hidden)
    line below header
    data row
    line between rows   (grid formats, between each pair of data rows)
    data row
    line below          (boxed formats)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .cells import Alignment, format_value
from .columns import Column, analyze_column
from .exceptions import HeaderCountMismatchError, UnsupportedTypeError
from .introspection import RecordIntrospector, extract
from .models import Layout, Table
from .rows import render_line, render_row

logger = logging.getLogger(__name__)


def _analyze_columns(
    headers: list[str] | None,
    rows: list[list[Any]],
    show_header: bool,
    text_align: Alignment,
) -> list[Column]:
    columns: list[Column] = []
    for index in range(len(rows[0])):
        header = headers[index] if headers is not None else None
        cells = []
        for row_index, row in enumerate(rows):
            try:
                cells.append(format_value(row[index], text_align))
            except UnsupportedTypeError as e:
                raise UnsupportedTypeError(
                    e.value, column=header, row=row_index, reason=e.reason
                ) from e
        columns.append(analyze_column(header, cells, show_header))
    return columns


def build_table(
    records: Iterable[Any],
    layout: Layout | None = None,
    *,
    introspector: RecordIntrospector | None = None,
) -> Table:
    """
    Render records as a table.

    Args:
        records: Uniform records (dataclasses, named tuples, mappings,
            objects) or a matrix of rows (lists or tuples of values)
        layout: Layout configuration (default: simple format, derived headers)
        introspector: Field reader for records (default: AttributeIntrospector)

    Returns:
        The rendered table

    Raises:
        EmptyInputError: If there is nothing to tabulate
        InconsistentRowLengthError: If matrix rows differ in length
        InconsistentRecordError: If records expose different fields
        HeaderCountMismatchError: If custom headers don't match the columns
        UnsupportedTypeError: If a value cannot be rendered as text
    """
    layout = layout or Layout()
    style = layout.style

    headers, rows = extract(records, introspector)
    column_count = len(rows[0])

    if layout.headers is not None:
        if len(layout.headers) != column_count:
            raise HeaderCountMismatchError(column_count, len(layout.headers))
        headers = list(layout.headers)

    show_header = headers is not None and not layout.hide_headers
    columns = _analyze_columns(headers, rows, show_header, layout.text_alignment)
    widths = [column.width for column in columns]

    logger.debug(
        "Rendering %d row(s) x %d column(s) as %s",
        len(rows),
        column_count,
        layout.table_format.value,
    )

    lines: list[str] = []
    if style.line_above is not None:
        lines.append(render_line(widths, style.line_above, style.padding))

    if show_header:
        lines.append(
            render_row(
                [(column.header or "", column.width, column.alignment) for column in columns],
                style,
            )
        )
        if style.line_below_header is not None:
            lines.append(render_line(widths, style.line_below_header, style.padding))

    for row_index in range(len(rows)):
        if row_index > 0 and style.line_between_rows is not None:
            lines.append(render_line(widths, style.line_between_rows, style.padding))
        lines.append(
            render_row(
                [
                    (column.texts[row_index], column.width, column.alignment)
                    for column in columns
                ],
                style,
            )
        )

    if style.line_below is not None:
        lines.append(render_line(widths, style.line_below, style.padding))

    return Table(tuple(lines))


def tabulate(
    records: Iterable[Any],
    layout: Layout | None = None,
    *,
    introspector: RecordIntrospector | None = None,
) -> str:
    """
    Render records as table text.

    Same as ``build_table`` but returns the newline-terminated text block.

    Example:
        >>> from recordtab import Layout, tabulate
        >>> print(tabulate([["here", "there"], ["1", "2"]],
        ...                Layout(headers=["a", "b"])), end="")
           a     b
        ---- -----
        here there
           1     2
    """
    return build_table(records, layout, introspector=introspector).text
