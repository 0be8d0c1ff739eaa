"""Report output models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class TaxResult(BaseModel):
    """Derived result of one tax computation. Never persisted."""

    model_config = ConfigDict(frozen=True)

    income: Decimal
    tax: Decimal
    net: Decimal
    effective_rate: Decimal
    marginal_rate: Decimal
