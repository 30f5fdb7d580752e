"""Pytest fixtures for recordtab tests."""

from dataclasses import dataclass

import pytest


@dataclass
class Produce:
    name: str
    amount: int


class FullName:
    """Stringer value: renders through its own __str__."""

    def __init__(self, first: str, last: str) -> None:
        self.first = first
        self.last = last

    def __str__(self) -> str:
        return f"{self.first} {self.last}"


@dataclass
class Delivery:
    Name: FullName  # noqa: N815
    Amount: int  # noqa: N815
    Location: str  # noqa: N815
    Done: bool  # noqa: N815
    SurfaceArea: float  # noqa: N815


@pytest.fixture
def produce() -> list[Produce]:
    """Two produce records, the smallest table worth rendering."""
    return [Produce("Apple", 15), Produce("Orange", 1)]


@pytest.fixture
def deliveries() -> list[Delivery]:
    """Records mixing stringer, int, str, bool and float fields."""
    return [
        Delivery(FullName("Roy", "Smith"), 15, "Washington D.C.", True, 0.3453),
        Delivery(FullName("Fred", "Flanders"), 100, "Montreal", False, 1.0),
        Delivery(FullName("Bobby", "Smith"), -2, "San Fransisco", False, 124353.23333333),
        Delivery(FullName("Jolene", "Lee"), 234, "Guyene", True, 11.0000000000001),
    ]


@pytest.fixture
def string_matrix() -> list[list[str]]:
    """Pre-stringified rows without field names."""
    return [["here", "there"], ["1", "2"]]
