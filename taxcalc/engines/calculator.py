"""Progressive income tax engine.

Each bracket taxes only the slice of income that falls inside its own band.
The top bracket is unbounded and simply absorbs whatever income remains.
"""

import logging
from decimal import Decimal

from taxcalc.engines.brackets import DEFAULT_BRACKET_TABLE
from taxcalc.models.brackets import BracketTable
from taxcalc.models.reports import TaxResult
from taxcalc.parsing.income import normalize_income, parse_income

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


def compute_tax(income: Decimal, table: BracketTable) -> TaxResult:
    """Compute tax, net income, effective rate and marginal rate.

    ``income`` must already be normalized to a finite value >= 0 and
    ``table`` must be a validated BracketTable.
    """
    remaining = max(income, _ZERO)
    last_cap = _ZERO
    tax = _ZERO
    marginal_rate = _ZERO

    for bracket in table.brackets:
        if bracket.upper_bound is None:
            span = remaining
        else:
            span = max(min(remaining, bracket.upper_bound - last_cap), _ZERO)

        if span <= _ZERO:
            # Nothing falls in this band, but later spans are measured from its cap.
            if bracket.upper_bound is not None:
                last_cap = bracket.upper_bound
            continue

        tax += span * bracket.rate
        remaining -= span
        marginal_rate = bracket.rate
        if bracket.upper_bound is not None:
            last_cap = bracket.upper_bound
        if remaining <= _ZERO:
            break

    net = income - tax
    effective_rate = tax / income if income > _ZERO else _ZERO

    logger.debug(
        "income=%s tax=%s effective=%s marginal=%s",
        income, tax, effective_rate, marginal_rate,
    )
    return TaxResult(
        income=income,
        tax=tax,
        net=net,
        effective_rate=effective_rate,
        marginal_rate=marginal_rate,
    )


class TaxCalculator:
    """Recomputes tax results against one bracket table.

    Results are memoized on the normalized income, so re-running the same
    input (for example on every keystroke of a prompt) is free.
    """

    def __init__(self, table: BracketTable = DEFAULT_BRACKET_TABLE) -> None:
        self.table = table
        self._cache: dict[Decimal, TaxResult] = {}

    def calculate(self, income: Decimal | int | float | str | None) -> TaxResult:
        normalized = normalize_income(income)
        result = self._cache.get(normalized)
        if result is None:
            result = compute_tax(normalized, self.table)
            self._cache[normalized] = result
        return result

    def calculate_text(self, raw: str | None) -> TaxResult:
        """Parse raw user text and compute the result."""
        return self.calculate(parse_income(raw))

    def clear_cache(self) -> None:
        self._cache.clear()
