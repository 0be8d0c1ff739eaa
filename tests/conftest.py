"""Shared test fixtures for the tax calculator."""

import json
from pathlib import Path

import pytest

from taxcalc.engines.brackets import get_bracket_table
from taxcalc.engines.calculator import TaxCalculator
from taxcalc.models.brackets import BracketTable
from taxcalc.models.enums import FilingStatus


@pytest.fixture
def reference_table() -> BracketTable:
    return get_bracket_table(2025, FilingStatus.SINGLE)


@pytest.fixture
def calculator(reference_table: BracketTable) -> TaxCalculator:
    return TaxCalculator(reference_table)


@pytest.fixture
def brackets_json(tmp_path: Path) -> Path:
    """A small custom table written in the {upTo, rate} JSON layout."""
    path = tmp_path / "brackets.json"
    path.write_text(
        json.dumps(
            [
                {"upTo": 10000, "rate": 0.0},
                {"upTo": 50000, "rate": 0.2},
                {"upTo": None, "rate": 0.4},
            ]
        )
    )
    return path
