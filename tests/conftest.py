"""Shared test fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sample_csv(fixtures_dir):
    return str(fixtures_dir / "sample.csv")


@pytest.fixture
def scenario_csv(fixtures_dir):
    return str(fixtures_dir / "scenario.csv")


@pytest.fixture
def empty_csv(fixtures_dir):
    return str(fixtures_dir / "empty.csv")


@pytest.fixture
def header_only_csv(fixtures_dir):
    return str(fixtures_dir / "header_only.csv")


@pytest.fixture
def fifteen_rows_csv(fixtures_dir):
    return str(fixtures_dir / "fifteen_rows.csv")


@pytest.fixture
def quoted_csv(fixtures_dir):
    return str(fixtures_dir / "quoted.csv")


@pytest.fixture
def mixed_csv(fixtures_dir):
    return str(fixtures_dir / "mixed.csv")


@pytest.fixture
def ragged_csv(fixtures_dir):
    return str(fixtures_dir / "ragged.csv")


@pytest.fixture
def duplicate_header_csv(fixtures_dir):
    return str(fixtures_dir / "duplicate_header.csv")


@pytest.fixture
def tool_context():
    """A mock ToolContext with a dict-backed state."""
    ctx = MagicMock()
    ctx.state = {}
    return ctx
