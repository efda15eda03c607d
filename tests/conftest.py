"""Shared pytest fixtures."""

from datetime import date
from pathlib import Path

import pytest

import concertscout.db as db_module

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_html():
    """Read a recorded listing page from tests/fixtures/."""
    def _read(name: str) -> str:
        return (FIXTURES / name).read_text(encoding="utf-8")
    return _read


@pytest.fixture
def today() -> date:
    return date(2025, 1, 1)


@pytest.fixture
def conn(tmp_path):
    connection = db_module.connect(tmp_path / "data" / "concerts.db")
    yield connection
    connection.close()
