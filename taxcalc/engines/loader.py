"""Load bracket tables from JSON files.

Accepted layouts::

    [{"upTo": 11925, "rate": 0.10}, ..., {"upTo": null, "rate": 0.37}]
    {"brackets": [...]}

The top bracket's ``upTo`` may be null, ``"inf"`` or ``"infinity"``.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from taxcalc.exceptions import BracketTableError
from taxcalc.models.brackets import BracketTable

logger = logging.getLogger(__name__)


def parse_bracket_table(text: str, source: str = "<string>") -> BracketTable:
    """Parse and validate a JSON bracket table."""
    try:
        data = json.loads(text, parse_float=Decimal, parse_int=Decimal)
    except json.JSONDecodeError as exc:
        raise BracketTableError(source, f"invalid JSON: {exc}") from exc

    if isinstance(data, dict):
        if "brackets" not in data:
            raise BracketTableError(source, "expected a 'brackets' key")
        data = data["brackets"]
    if not isinstance(data, list):
        raise BracketTableError(source, "expected a JSON array of brackets")

    try:
        return BracketTable.model_validate({"brackets": data})
    except ValidationError as exc:
        raise BracketTableError(source, str(exc)) from exc


def load_bracket_table(path: Path) -> BracketTable:
    """Read a bracket table from *path*, failing fast on any problem."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot read bracket table %s: %s", path, exc)
        raise BracketTableError(str(path), f"cannot read file: {exc}") from exc

    try:
        table = parse_bracket_table(text, source=str(path))
    except BracketTableError as exc:
        logger.error("Rejected bracket table %s: %s", path, exc)
        raise
    logger.info("Loaded %d brackets from %s", len(table.brackets), path)
    return table
