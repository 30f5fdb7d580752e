"""Row and border line rendering."""

from __future__ import annotations

from collections.abc import Sequence

from .cells import Alignment
from .columns import display_width
from .formats import Line, TableStyle


def pad(text: str, width: int, alignment: Alignment) -> str:
    """Pad ``text`` with spaces to ``width`` display columns.

    Left-aligned text is padded on the right; right and decimal aligned
    text on the left. Text already wider than ``width`` is returned as is.
    """
    fill = " " * max(width - display_width(text), 0)
    if alignment is Alignment.LEFT:
        return text + fill
    return fill + text


def render_row(
    cells: Sequence[tuple[str, int, Alignment]],
    style: TableStyle,
) -> str:
    """
    Render one header or data row.

    Args:
        cells: (text, width, alignment) for each column
        style: Style providing the row glyphs and cell padding

    Returns:
        The row, without a trailing newline
    """
    padding = " " * style.padding
    padded = [
        f"{padding}{pad(text, width, alignment)}{padding}" for text, width, alignment in cells
    ]
    return style.row.begin + style.row.sep.join(padded) + style.row.end


def render_line(widths: Sequence[int], line: Line, padding: int = 0) -> str:
    """Render a border or separator line spanning columns of the given widths."""
    segments = [line.fill * (width + 2 * padding) for width in widths]
    return line.begin + line.sep.join(segments) + line.end
