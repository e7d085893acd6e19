"""
Shared pytest fixtures for the consoletable test suite.

Usage in tests:
    def test_something(example_table):
        assert "broccoli" in example_table.render()
"""

from datetime import datetime
from decimal import Decimal

import pytest

from consoletable import ConsoleTable


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove environment overrides so tests see library defaults."""
    for name in (
        "CONSOLETABLE_STYLE",
        "CONSOLETABLE_ALIGNMENT",
        "CONSOLETABLE_ASCII_ONLY",
        "CONSOLETABLE_UNICODE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def example_table():
    """
    Headers One/Two/Three with four rows of mixed values.

    Column widths are 7, 12 and 23.
    """
    table = ConsoleTable()
    table.set_headers("One", "Two", "Three")
    table.add_row(Decimal("98.76"), "broccoli", "flexible")
    table.add_row(Decimal("1.23"), "announcement", "reflection")
    table.add_row(Decimal("1234.45"), None, datetime(2020, 12, 24, 14, 15, 16, 987000).isoformat(timespec="milliseconds"))
    table.add_row(Decimal("0"), "pleasant", "wild")
    return table


@pytest.fixture
def pet_table():
    """Pets with a left aligned, a right aligned and a centred column."""
    table = ConsoleTable()
    table.set_headers("-Pet", "Age", "'Sex")
    table.add_row("Cat", 10, "F")
    table.add_row("Dog", 5, "M")
    return table
