"""Tax computation engines."""

from taxcalc.engines.calculator import TaxCalculator, compute_tax
from taxcalc.engines.loader import load_bracket_table, parse_bracket_table

__all__ = [
    "TaxCalculator",
    "compute_tax",
    "load_bracket_table",
    "parse_bracket_table",
]
