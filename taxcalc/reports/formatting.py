"""Display formatting for tax results."""

import math
from decimal import Decimal

from pydantic import BaseModel, Field

from taxcalc.models.reports import TaxResult

UNBOUNDED_LABEL = "∞ (and above)"


class DisplaySettings(BaseModel):
    """Decimal places used when rendering rates."""

    effective_places: int = Field(default=2, ge=0)
    marginal_places: int = Field(default=0, ge=0)
    rate_places: int = Field(default=0, ge=0)


def _is_finite(value: Decimal | float | None) -> bool:
    if value is None:
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def format_currency(amount: Decimal | float | None) -> str:
    """Format a USD amount as ``$1,234.56``; non-finite renders empty."""
    if not _is_finite(amount):
        return ""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def format_percent(rate: Decimal | float | None, places: int = 2) -> str:
    """Format a 0..1 rate as a percentage with fixed decimals."""
    if not _is_finite(rate):
        return ""
    return f"{rate * 100:.{places}f}%"


def format_bound(upper_bound: Decimal | None) -> str:
    if upper_bound is None:
        return UNBOUNDED_LABEL
    return format_currency(upper_bound)


def format_result(
    result: TaxResult, settings: DisplaySettings | None = None
) -> dict[str, str]:
    settings = settings or DisplaySettings()
    return {
        "tax": format_currency(result.tax),
        "net": format_currency(result.net),
        "effective_rate": format_percent(result.effective_rate, settings.effective_places),
        "marginal_rate": format_percent(result.marginal_rate, settings.marginal_places),
    }
