"""Tests for Bracket and BracketTable validation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from taxcalc.models.brackets import Bracket, BracketTable


def _table(*pairs):
    return BracketTable.from_pairs(pairs)


class TestBracket:
    def test_aliases(self):
        assert Bracket.model_validate({"upTo": "100", "rate": "0.1"}).upper_bound == Decimal("100")
        assert Bracket.model_validate({"up_to": "100", "rate": "0.1"}).upper_bound == Decimal("100")

    def test_infinite_bound_becomes_none(self):
        assert Bracket(upper_bound=Decimal("Infinity"), rate=Decimal("0.3")).is_unbounded
        assert Bracket(upper_bound=float("inf"), rate=Decimal("0.3")).is_unbounded
        assert Bracket(upper_bound="inf", rate=Decimal("0.3")).is_unbounded

    def test_rate_bounds(self):
        Bracket(upper_bound=None, rate=Decimal("0"))
        Bracket(upper_bound=None, rate=Decimal("1"))
        with pytest.raises(ValidationError):
            Bracket(upper_bound=None, rate=Decimal("-0.01"))
        with pytest.raises(ValidationError):
            Bracket(upper_bound=None, rate=Decimal("1.01"))

    def test_frozen(self):
        bracket = Bracket(upper_bound=None, rate=Decimal("0.1"))
        with pytest.raises(ValidationError):
            bracket.rate = Decimal("0.2")


class TestBracketTable:
    def test_valid_table(self):
        table = _table((Decimal("100"), Decimal("0.1")), (None, Decimal("0.2")))
        assert table.to_pairs() == [(Decimal("100"), Decimal("0.1")), (None, Decimal("0.2"))]

    def test_empty(self):
        with pytest.raises(ValidationError, match="empty"):
            _table()

    def test_missing_unbounded_terminal(self):
        with pytest.raises(ValidationError, match="last bracket must be unbounded"):
            _table((Decimal("100"), Decimal("0.1")), (Decimal("200"), Decimal("0.2")))

    def test_unbounded_not_last(self):
        with pytest.raises(ValidationError, match="not the last bracket"):
            _table((None, Decimal("0.1")), (None, Decimal("0.2")))

    def test_decreasing_bounds(self):
        with pytest.raises(ValidationError, match="must exceed"):
            _table(
                (Decimal("200"), Decimal("0.1")),
                (Decimal("100"), Decimal("0.2")),
                (None, Decimal("0.3")),
            )

    def test_non_positive_first_bound(self):
        with pytest.raises(ValidationError, match="must exceed 0"):
            _table((Decimal("0"), Decimal("0.1")), (None, Decimal("0.2")))

    def test_immutable(self):
        table = _table((None, Decimal("0.1")))
        with pytest.raises(ValidationError):
            table.brackets = ()
