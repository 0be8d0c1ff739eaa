"""Input parsing for the tax calculator."""

from taxcalc.parsing.income import MAX_INCOME, normalize_income, parse_income

__all__ = ["MAX_INCOME", "normalize_income", "parse_income"]
