"""
Record introspection.

Turns the caller's records into column names and a matrix of raw values.
Field discovery is behind the ``RecordIntrospector`` protocol so callers can
plug in their own rules; ``AttributeIntrospector`` handles dataclasses, named
tuples, mappings and plain objects.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from .exceptions import (
    EmptyInputError,
    InconsistentRecordError,
    InconsistentRowLengthError,
    UnsupportedTypeError,
)


class RecordIntrospector(Protocol):
    """Protocol for reading the named fields of a record."""

    def fields(self, record: Any) -> list[tuple[str, Any]]:
        """
        Read a record's fields.

        Args:
            record: One record from the input collection

        Returns:
            (field name, value) pairs in column order
        """
        ...


class AttributeIntrospector:
    """
    Read fields from common record shapes.

    Supported, in lookup order:
    - dataclass instances: fields in declaration order
    - named tuples: ``_fields`` in declaration order
    - mappings: items in iteration order (keys rendered with ``str``)
    - objects with ``__slots__``: slots that are set
    - other objects: public instance attributes from ``vars()``
    """

    def fields(self, record: Any) -> list[tuple[str, Any]]:
        if dataclasses.is_dataclass(record) and not isinstance(record, type):
            return [(f.name, getattr(record, f.name)) for f in dataclasses.fields(record)]

        if isinstance(record, tuple) and hasattr(record, "_fields"):
            return list(zip(record._fields, record))

        if isinstance(record, Mapping):
            return [(str(key), value) for key, value in record.items()]

        slots = _slot_names(type(record))
        if slots:
            return [(name, getattr(record, name)) for name in slots if hasattr(record, name)]

        try:
            attrs = vars(record)
        except TypeError:
            raise UnsupportedTypeError(record, reason="record has no readable fields") from None
        return [(name, value) for name, value in attrs.items() if not name.startswith("_")]


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if not s.startswith("_") and s not in names)
    return names


def is_matrix_row(record: Any) -> bool:
    """True for plain list/tuple rows, which carry no field names."""
    return isinstance(record, (list, tuple)) and not hasattr(record, "_fields")


def extract(
    records: Iterable[Any],
    introspector: RecordIntrospector | None = None,
) -> tuple[list[str] | None, list[list[Any]]]:
    """
    Split records into column names and rows of raw values.

    A collection whose first item is a plain list or tuple is read as a
    matrix: rows are used as-is and no column names are derived. Anything
    else is read record by record through the introspector.

    Args:
        records: The input collection (any iterable, read once)
        introspector: Field reader for record mode, defaults to
            ``AttributeIntrospector``

    Returns:
        (column names or None for a matrix, rows of values)

    Raises:
        EmptyInputError: If there are no records or no columns
        InconsistentRowLengthError: If matrix rows differ in length
        InconsistentRecordError: If records expose different fields
    """
    items = list(records)
    if not items:
        raise EmptyInputError()

    if is_matrix_row(items[0]):
        return None, _extract_matrix(items)

    return _extract_records(items, introspector or AttributeIntrospector())


def _extract_matrix(items: list[Any]) -> list[list[Any]]:
    width = len(items[0])
    if width == 0:
        raise EmptyInputError("rows have no cells")

    rows: list[list[Any]] = []
    for index, item in enumerate(items):
        if not is_matrix_row(item):
            raise UnsupportedTypeError(item, row=index, reason="expected a list or tuple row")
        if len(item) != width:
            raise InconsistentRowLengthError(index, width, len(item))
        rows.append(list(item))
    return rows


def _extract_records(
    items: list[Any],
    introspector: RecordIntrospector,
) -> tuple[list[str], list[list[Any]]]:
    names: list[str] | None = None
    rows: list[list[Any]] = []
    for index, record in enumerate(items):
        fields = introspector.fields(record)
        record_names = [name for name, _ in fields]
        if names is None:
            if not record_names:
                raise EmptyInputError("records have no fields")
            names = record_names
        elif record_names != names:
            raise InconsistentRecordError(index, names, record_names)
        rows.append([value for _, value in fields])
    assert names is not None
    return names, rows
