"""Exceptions for recordtab."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class RecordTabError(Exception):
    """
    Base exception for all recordtab errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class LayoutError(RecordTabError):
    """
    Base exception for layout configuration errors.

    This includes custom headers that don't match the data and unknown
    format names.
    """

    pass


class InputError(RecordTabError):
    """
    Base exception for errors in the records being tabulated.

    This includes empty input and rows or records that don't share the
    same shape.
    """

    pass


# ---------------------------------------------------------------------------
# Cell Exceptions
# ---------------------------------------------------------------------------


class UnsupportedTypeError(RecordTabError, TypeError):
    """
    Raised when a cell value cannot be rendered as text.

    Supported values are strings, integers, floats, booleans, None and
    objects that define their own ``__str__``.

    Attributes:
        value: The offending value
        type_name: Name reported for the value, defaults to its type name
        column: Header of the column holding the value, if known
        row: Zero-based data row index, if known
        reason: Extra detail appended to the message
    """

    def __init__(
        self,
        value: Any,
        *,
        type_name: str | None = None,
        column: str | None = None,
        row: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.value = value
        self._type_name = type_name
        self.column = column
        self.row = row
        self.reason = reason
        super().__init__(self._format_message())

    @property
    def type_name(self) -> str:
        return self._type_name or type(self.value).__name__

    def _format_message(self) -> str:
        msg = f"Unsupported type: {self.type_name}"
        location = []
        if self.column is not None:
            location.append(f"column '{self.column}'")
        if self.row is not None:
            location.append(f"row {self.row}")
        if location:
            msg += f" ({', '.join(location)})"
        if self.reason:
            msg += f": {self.reason}"
        return msg


# ---------------------------------------------------------------------------
# Layout Exceptions
# ---------------------------------------------------------------------------


class HeaderCountMismatchError(LayoutError):
    """Raised when custom headers don't match the number of columns."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Header count mismatch: data has {expected} column(s), "
            f"{actual} header(s) given"
        )


class UnknownFormatError(LayoutError):
    """Raised when a format name doesn't match any known table format."""

    def __init__(self, name: str, choices: list[str] | None = None) -> None:
        self.name = name
        self.choices = choices or []
        msg = f"Unknown table format: {name!r}"
        if self.choices:
            msg += f". Expected one of: {', '.join(self.choices)}"
        super().__init__(msg)


# ---------------------------------------------------------------------------
# Input Exceptions
# ---------------------------------------------------------------------------


class EmptyInputError(InputError):
    """Raised when there are no records, or the records have no fields."""

    def __init__(self, reason: str = "no records to tabulate") -> None:
        self.reason = reason
        super().__init__(f"Empty input: {reason}")


class InconsistentRowLengthError(InputError):
    """Raised when a row has a different number of cells than the first row."""

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row} has {actual} cell(s), expected {expected}"
        )


class InconsistentRecordError(InputError):
    """
    Raised when a record exposes different fields than the first record.

    Attributes:
        row: Zero-based index of the offending record
        expected: Field names of the first record
        actual: Field names of the offending record
    """

    def __init__(self, row: int, expected: list[str], actual: list[str]) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Record {row} has fields [{', '.join(actual)}], "
            f"expected [{', '.join(expected)}]"
        )
