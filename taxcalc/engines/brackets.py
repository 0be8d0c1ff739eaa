"""Tax bracket configuration.

Federal ordinary income brackets keyed by tax year and filing status.
Never hardcode brackets in computation functions.

Sources:
  - 2024: IRS Rev. Proc. 2023-34
  - 2025: IRS Rev. Proc. 2024-40
"""

from decimal import Decimal

from pydantic import ValidationError

from taxcalc.exceptions import BracketTableError
from taxcalc.models.brackets import BracketTable
from taxcalc.models.enums import FilingStatus

DEFAULT_TAX_YEAR = 2025

# ---------------------------------------------------------------------------
# Federal ordinary income brackets: {year: {filing_status: [(upper_bound, rate), ...]}}
# Upper bound is Decimal or None for the top bracket.
# ---------------------------------------------------------------------------
FEDERAL_BRACKETS: dict[int, dict[FilingStatus, list[tuple[Decimal | None, Decimal]]]] = {
    2024: {
        FilingStatus.SINGLE: [
            (Decimal("11600"), Decimal("0.10")),
            (Decimal("47150"), Decimal("0.12")),
            (Decimal("100525"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243725"), Decimal("0.32")),
            (Decimal("609350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("23200"), Decimal("0.10")),
            (Decimal("94300"), Decimal("0.12")),
            (Decimal("201050"), Decimal("0.22")),
            (Decimal("383900"), Decimal("0.24")),
            (Decimal("487450"), Decimal("0.32")),
            (Decimal("731200"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFS: [
            (Decimal("11600"), Decimal("0.10")),
            (Decimal("47150"), Decimal("0.12")),
            (Decimal("100525"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243725"), Decimal("0.32")),
            (Decimal("365600"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.HOH: [
            (Decimal("16550"), Decimal("0.10")),
            (Decimal("63100"), Decimal("0.12")),
            (Decimal("100500"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243700"), Decimal("0.32")),
            (Decimal("609350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
    },
    2025: {
        FilingStatus.SINGLE: [
            (Decimal("11925"), Decimal("0.10")),
            (Decimal("48475"), Decimal("0.12")),
            (Decimal("103350"), Decimal("0.22")),
            (Decimal("197300"), Decimal("0.24")),
            (Decimal("250525"), Decimal("0.32")),
            (Decimal("626350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("23850"), Decimal("0.10")),
            (Decimal("96950"), Decimal("0.12")),
            (Decimal("206700"), Decimal("0.22")),
            (Decimal("394600"), Decimal("0.24")),
            (Decimal("501050"), Decimal("0.32")),
            (Decimal("751600"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
    },
}


def get_bracket_table(
    tax_year: int = DEFAULT_TAX_YEAR,
    filing_status: FilingStatus = FilingStatus.SINGLE,
) -> BracketTable:
    """Build the validated federal table for a year and filing status."""
    source = f"federal {tax_year}/{filing_status}"
    pairs = FEDERAL_BRACKETS.get(tax_year, {}).get(filing_status)
    if not pairs:
        raise BracketTableError(source, "no brackets configured")
    try:
        return BracketTable.from_pairs(pairs)
    except ValidationError as exc:
        raise BracketTableError(source, str(exc)) from exc


# Built once at import so a bad embedded table fails at startup.
DEFAULT_BRACKET_TABLE = get_bracket_table(DEFAULT_TAX_YEAR, FilingStatus.SINGLE)
