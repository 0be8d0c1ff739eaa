"""Data models for the tax calculator."""

from taxcalc.models.brackets import Bracket, BracketTable
from taxcalc.models.enums import FilingStatus
from taxcalc.models.reports import TaxResult

__all__ = [
    "Bracket",
    "BracketTable",
    "FilingStatus",
    "TaxResult",
]
