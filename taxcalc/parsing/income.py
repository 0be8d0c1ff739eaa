"""Income input normalization.

Turns raw user text (or loose numeric values) into a finite, non-negative
Decimal the engine can consume. Bad input never raises; it becomes zero.
"""

import logging
import math
import re
from decimal import Decimal, InvalidOperation

logger = logging.getLogger(__name__)

# Largest integer a double represents exactly; incomes are clamped to it.
MAX_INCOME = Decimal("9007199254740991")

_NON_NUMERIC = re.compile(r"[^0-9.\-]")

_ZERO = Decimal("0")


def _clamp(value: Decimal) -> Decimal:
    if not value.is_finite() or value <= _ZERO:
        return _ZERO
    return min(value, MAX_INCOME)


def parse_income(raw: str | None) -> Decimal:
    """Parse free-form income text such as ``"$150,000"``.

    Everything except digits, ``.`` and ``-`` is stripped before conversion.
    Empty or malformed text maps to zero.
    """
    if raw is None:
        return _ZERO
    cleaned = _NON_NUMERIC.sub("", raw)
    if not cleaned:
        return _ZERO
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        logger.debug("Income text %r is not a number, using 0", raw)
        return _ZERO
    return _clamp(value)


def normalize_income(value: Decimal | int | float | str | None) -> Decimal:
    """Coerce any supported income value into the engine's domain."""
    if value is None:
        return _ZERO
    if isinstance(value, str):
        return parse_income(value)
    if isinstance(value, Decimal):
        return _clamp(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            logger.debug("Non-finite income %r, using 0", value)
            return _ZERO
        return _clamp(Decimal(str(value)))
    if isinstance(value, int):
        return _clamp(Decimal(value))
    raise TypeError(f"Unsupported income type: {type(value).__name__}")
