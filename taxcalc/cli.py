"""Typer CLI interface for the income tax calculator."""

import json
import logging
from pathlib import Path

import typer

from taxcalc.engines.brackets import DEFAULT_TAX_YEAR
from taxcalc.models.brackets import BracketTable
from taxcalc.models.reports import TaxResult
from taxcalc.reports.formatting import (
    DisplaySettings,
    format_bound,
    format_currency,
    format_percent,
    format_result,
)

BANNER = r"""
   _____________
  |  _________  |
  | |  $  %   | |
  | |_________| |
  |  1  2  3  + |
  |  4  5  6  - |
  |  7  8  9  = |
  |_____________|

  Disposable Income Tax Calculator
  "Every bracket taxes only its own slice."
"""

_FS_MAP: dict[str, str] = {
    "SINGLE": "SINGLE",
    "MFJ": "MARRIED_FILING_JOINTLY",
    "MFS": "MARRIED_FILING_SEPARATELY",
    "HOH": "HEAD_OF_HOUSEHOLD",
}

_QUIT_WORDS = {"q", "quit", "exit"}


app = typer.Typer(
    name="taxcalc",
    help="Progressive income tax calculator.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Progressive income tax calculator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(BANNER)
        raise typer.Exit()


def _resolve_table(year: int, filing_status: str, brackets_file: Path | None) -> BracketTable:
    """Pick the bracket table from a file or the embedded data, exiting on error."""
    from taxcalc.engines.brackets import get_bracket_table
    from taxcalc.engines.loader import load_bracket_table
    from taxcalc.exceptions import BracketTableError
    from taxcalc.models.enums import FilingStatus

    try:
        if brackets_file is not None:
            return load_bracket_table(brackets_file)

        fs_key = filing_status.upper()
        try:
            fs = FilingStatus(_FS_MAP.get(fs_key, fs_key))
        except ValueError:
            valid = ", ".join(_FS_MAP.keys())
            typer.echo(f"Error: Invalid filing status '{filing_status}'. Valid: {valid}", err=True)
            raise typer.Exit(1)
        return get_bracket_table(year, fs)
    except BracketTableError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


def _echo_result(result: TaxResult, settings: DisplaySettings) -> None:
    formatted = format_result(result, settings)
    typer.echo(f"  Income:                {format_currency(result.income):>16}")
    typer.echo(f"  Federal tax:           {formatted['tax']:>16}")
    typer.echo(f"  Net (after tax):       {formatted['net']:>16}")
    typer.echo(f"  Effective tax rate:    {formatted['effective_rate']:>16}")
    typer.echo(f"  Marginal tax rate:     {formatted['marginal_rate']:>16}")


@app.command(context_settings={"ignore_unknown_options": True})
def calc(
    income: str = typer.Argument(..., help="Annual salary, e.g. 150000 or '$150,000'"),
    year: int = typer.Option(DEFAULT_TAX_YEAR, "--year", "-y", help="Tax year of the embedded brackets"),
    filing_status: str = typer.Option(
        "SINGLE",
        "--filing-status",
        "-s",
        help="Filing status: SINGLE, MFJ, MFS, HOH",
    ),
    brackets_file: Path | None = typer.Option(
        None,
        "--brackets",
        "-b",
        envvar="TAXCALC_BRACKETS",
        help="JSON file of {upTo, rate} brackets (overrides --year/--filing-status)",
    ),
    effective_places: int = typer.Option(
        2, "--effective-places", min=0, help="Decimals shown for the effective rate"
    ),
    marginal_places: int = typer.Option(
        0, "--marginal-places", min=0, help="Decimals shown for the marginal rate"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Compute tax, net income and rates for one income."""
    from taxcalc.engines.calculator import TaxCalculator

    table = _resolve_table(year, filing_status, brackets_file)
    result = TaxCalculator(table).calculate_text(income)

    if json_output:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    settings = DisplaySettings(
        effective_places=effective_places, marginal_places=marginal_places
    )
    typer.echo("")
    typer.echo("=== Income Tax ===")
    _echo_result(result, settings)


@app.command()
def brackets(
    year: int = typer.Option(DEFAULT_TAX_YEAR, "--year", "-y", help="Tax year of the embedded brackets"),
    filing_status: str = typer.Option(
        "SINGLE",
        "--filing-status",
        "-s",
        help="Filing status: SINGLE, MFJ, MFS, HOH",
    ),
    brackets_file: Path | None = typer.Option(
        None,
        "--brackets",
        "-b",
        envvar="TAXCALC_BRACKETS",
        help="JSON file of {upTo, rate} brackets",
    ),
) -> None:
    """Show the bracket table in use."""
    from rich.console import Console
    from rich.table import Table

    table = _resolve_table(year, filing_status, brackets_file)
    settings = DisplaySettings()

    if brackets_file is not None:
        title = f"Brackets ({brackets_file.name})"
    else:
        title = f"Federal brackets {year} ({filing_status.upper()})"
    rich_table = Table(title=title)
    rich_table.add_column("Up to", justify="right")
    rich_table.add_column("Rate", justify="right")
    for bracket in table.brackets:
        rich_table.add_row(
            format_bound(bracket.upper_bound),
            format_percent(bracket.rate, settings.rate_places),
        )
    Console().print(rich_table)


@app.command()
def interactive(
    year: int = typer.Option(DEFAULT_TAX_YEAR, "--year", "-y", help="Tax year of the embedded brackets"),
    filing_status: str = typer.Option(
        "SINGLE",
        "--filing-status",
        "-s",
        help="Filing status: SINGLE, MFJ, MFS, HOH",
    ),
    brackets_file: Path | None = typer.Option(
        None,
        "--brackets",
        "-b",
        envvar="TAXCALC_BRACKETS",
        help="JSON file of {upTo, rate} brackets",
    ),
) -> None:
    """Prompt for incomes and recompute after every entry."""
    from rich.console import Console
    from rich.prompt import Prompt

    from taxcalc.engines.calculator import TaxCalculator

    table = _resolve_table(year, filing_status, brackets_file)
    calculator = TaxCalculator(table)
    settings = DisplaySettings()
    console = Console()

    console.print("[bold]Enter your annual salary[/bold] ('clear' resets, 'q' quits)")
    while True:
        try:
            raw = Prompt.ask("Salary", console=console).strip()
        except EOFError:
            break
        if raw.lower() in _QUIT_WORDS:
            break
        if raw.lower() == "clear":
            raw = ""
        _echo_result(calculator.calculate_text(raw), settings)
