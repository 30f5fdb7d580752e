"""
Column analysis.

Given a column's header and its formatted cells, works out the width every
cell in the column is padded to and the single alignment they all share.
Widths are measured in terminal columns, so wide characters count double.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from wcwidth import wcswidth

from .cells import Alignment, Cell, CellKind
from .exceptions import UnsupportedTypeError


def display_width(text: str) -> int:
    """Terminal display width of ``text``.

    Falls back to the code point count for strings holding control
    characters, which ``wcswidth`` can't measure.
    """
    width = wcswidth(text)
    return len(text) if width < 0 else width


@dataclass(frozen=True)
class Column:
    """
    A fully analysed column.

    Attributes:
        header: Header label, or None when no header is shown
        texts: Cell texts, normalised for decimal alignment if needed
        width: Display width every cell (and the header) is padded to
        alignment: Alignment shared by the header and all cells
    """

    header: str | None
    texts: tuple[str, ...]
    width: int
    alignment: Alignment


def _column_kind(header: str | None, cells: Sequence[Cell]) -> CellKind:
    kind = CellKind.EMPTY
    for row, cell in enumerate(cells):
        if cell.kind is CellKind.EMPTY or cell.kind is kind:
            continue
        if kind is CellKind.EMPTY:
            kind = cell.kind
        elif kind.is_numeric and cell.kind.is_numeric:
            kind = CellKind.FLOAT
        else:
            raise UnsupportedTypeError(
                cell.text,
                type_name=cell.kind.value,
                column=header,
                row=row,
                reason=f"{cell.kind.value} value in a {kind.value} column",
            )
    return kind


def _column_alignment(kind: CellKind, cells: Sequence[Cell]) -> Alignment:
    if kind is CellKind.FLOAT:
        return Alignment.DECIMAL
    for cell in cells:
        if cell.kind is not CellKind.EMPTY:
            return cell.alignment
    return Alignment.RIGHT


def _split_decimal(text: str) -> tuple[str, str]:
    # exponent-only forms such as 1e-05 split at the exponent
    for marker in (".", "e", "E"):
        point = text.find(marker)
        if point > 0:
            return text[:point], text[point:]
    return text, ""


def align_decimal(texts: Sequence[str]) -> list[str]:
    """
    Line numbers up on their decimal point.

    Integer parts are right-justified and fractional parts (point included)
    left-justified, so every result has the same width:

        >>> align_decimal(["0.5", "12", "3.25"])
        [' 0.5 ', '12   ', ' 3.25']
    """
    parts = [_split_decimal(text) for text in texts]
    int_width = max((display_width(whole) for whole, _ in parts), default=0)
    frac_width = max((display_width(frac) for _, frac in parts), default=0)
    return [
        " " * (int_width - display_width(whole))
        + whole
        + frac
        + " " * (frac_width - display_width(frac))
        for whole, frac in parts
    ]


def analyze_column(
    header: str | None,
    cells: Sequence[Cell],
    show_header: bool = True,
) -> Column:
    """
    Compute a column's width and alignment.

    Args:
        header: Header label for the column
        cells: Formatted cells, one per data row
        show_header: Whether the header counts towards the width

    Returns:
        The analysed column

    Raises:
        UnsupportedTypeError: If the column mixes incompatible kinds of value
    """
    kind = _column_kind(header, cells)
    alignment = _column_alignment(kind, cells)

    texts = [cell.text for cell in cells]
    if alignment is Alignment.DECIMAL:
        texts = align_decimal(texts)

    width = max((display_width(text) for text in texts), default=0)
    if show_header and header is not None:
        width = max(width, display_width(header))

    return Column(
        header=header if show_header else None,
        texts=tuple(texts),
        width=width,
        alignment=alignment,
    )
