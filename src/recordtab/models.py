"""Core models for recordtab."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .cells import Alignment
from .formats import TableFormat, TableStyle


@dataclass(frozen=True)
class Layout:
    """
    Table layout configuration.

    Attributes:
        format: Table format, as a member or its name (default: simple)
        headers: Column labels replacing the derived field names, one per column
        hide_headers: Omit the header row and the line below it
        text_align: Alignment of string and stringer columns, as a member or its name
    """

    format: TableFormat | str = TableFormat.SIMPLE
    headers: Sequence[str] | None = None
    hide_headers: bool = False
    text_align: Alignment | str = Alignment.RIGHT

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "format", TableFormat.parse(self.format))
        if self.headers is not None:
            if isinstance(self.headers, str):
                raise ValueError("headers must be a sequence of labels, not a string")
            object.__setattr__(self, "headers", tuple(str(h) for h in self.headers))
        text_align = self.text_align
        if isinstance(text_align, str):
            text_align = text_align.strip().lower()
        try:
            text_align = Alignment(text_align)
        except ValueError:
            raise ValueError(f"Unknown text_align: {self.text_align!r}") from None
        if text_align is Alignment.DECIMAL:
            raise ValueError("text_align must be LEFT or RIGHT")
        object.__setattr__(self, "text_align", text_align)

    @property
    def table_format(self) -> TableFormat:
        """The format as a ``TableFormat`` member."""
        return TableFormat.parse(self.format)

    @property
    def text_alignment(self) -> Alignment:
        """The text alignment as an ``Alignment`` member."""
        return Alignment(self.text_align)

    @property
    def style(self) -> TableStyle:
        return self.table_format.style


@dataclass(frozen=True)
class Table:
    """
    A rendered table.

    Attributes:
        lines: Rendered lines, borders included, without newlines
    """

    lines: tuple[str, ...]

    def __str__(self) -> str:
        return self.text

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        """All lines, each terminated by a newline."""
        return "".join(f"{line}\n" for line in self.lines)
