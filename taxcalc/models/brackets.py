"""Bracket table models.

A table is an ordered run of bands. Each band covers income in
``(previous upper bound, upper_bound]`` and the final band is unbounded.
Tables are validated once when built and are immutable afterwards.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

_UNBOUNDED_TOKENS = {"inf", "+inf", "infinity", "+infinity", "∞"}


class Bracket(BaseModel):
    model_config = ConfigDict(frozen=True)

    upper_bound: Decimal | None = Field(
        validation_alias=AliasChoices("upper_bound", "upTo", "up_to"),
        description="Inclusive ceiling of the band; None for the top bracket",
    )
    rate: Decimal = Field(ge=0, le=1)

    @field_validator("upper_bound", mode="before")
    @classmethod
    def _coerce_unbounded(cls, value: Any) -> Any:
        """Map the spellings of +infinity onto None."""
        if isinstance(value, str) and value.strip().lower() in _UNBOUNDED_TOKENS:
            return None
        if isinstance(value, Decimal) and value.is_infinite() and value > 0:
            return None
        if isinstance(value, float) and value == float("inf"):
            return None
        return value

    @property
    def is_unbounded(self) -> bool:
        return self.upper_bound is None


class BracketTable(BaseModel):
    """Ordered, validated, read-only set of tax brackets."""

    model_config = ConfigDict(frozen=True)

    brackets: tuple[Bracket, ...]

    @model_validator(mode="after")
    def _check_invariants(self) -> "BracketTable":
        if not self.brackets:
            raise ValueError("bracket table is empty")

        prev_bound = Decimal("0")
        last_index = len(self.brackets) - 1
        for index, bracket in enumerate(self.brackets):
            if bracket.upper_bound is None:
                if index != last_index:
                    raise ValueError(
                        f"bracket {index} is unbounded but is not the last bracket"
                    )
                continue
            if index == last_index:
                raise ValueError("last bracket must be unbounded")
            if bracket.upper_bound <= prev_bound:
                raise ValueError(
                    f"bracket {index} upper bound {bracket.upper_bound} "
                    f"must exceed {prev_bound}"
                )
            prev_bound = bracket.upper_bound
        return self

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[Decimal | None, Decimal]]
    ) -> "BracketTable":
        """Build a table from ``(upper_bound, rate)`` pairs."""
        return cls(
            brackets=tuple(
                Bracket(upper_bound=upper_bound, rate=rate) for upper_bound, rate in pairs
            )
        )

    def to_pairs(self) -> list[tuple[Decimal | None, Decimal]]:
        return [(b.upper_bound, b.rate) for b in self.brackets]
