"""CLI interface for DealIQ."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dealiq.config import AppConfig, load_config
from dealiq.models import DealMetrics, Property
from dealiq.analysis import (
    DealAnalyzer,
    format_currency,
    format_percentage,
    meets_criteria,
    summarize,
)

app = typer.Typer(
    name="dealiq",
    help="Deal analyzer - flip and rental metrics for investment properties.",
    no_args_is_help=True,
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load(config_path: Path | None) -> AppConfig:
    try:
        return load_config(config_path)
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _overrides(**values) -> dict:
    return {k: v for k, v in values.items() if v is not None}


@app.command()
def analyze(
    price: float = typer.Option(0, "--price", "-p", help="Purchase price"),
    repair: float = typer.Option(0, "--repair", "-r", help="Estimated repair cost"),
    arv: float = typer.Option(0, "--arv", "-a", help="After-repair value"),
    address: str = typer.Option("", "--address", help="Property address for the summary"),
    rent: float = typer.Option(None, "--rent", help="Monthly rent"),
    vacancy: float = typer.Option(None, "--vacancy", help="Vacancy rate, %"),
    management: float = typer.Option(None, "--management", help="Management fee, % of rent"),
    maintenance: float = typer.Option(None, "--maintenance", help="Maintenance, % of rent"),
    insurance: float = typer.Option(None, "--insurance", help="Annual insurance"),
    tax: float = typer.Option(None, "--tax", help="Annual property tax"),
    hoa: float = typer.Option(None, "--hoa", help="Monthly HOA"),
    loan: float = typer.Option(None, "--loan", help="Loan amount (default 80% of price)"),
    rate: float = typer.Option(None, "--rate", help="Annual interest rate, %"),
    term: float = typer.Option(None, "--term", help="Loan term in years"),
    closing_pct: float = typer.Option(None, "--closing-pct", help="Closing expenses, % of price"),
    holding_months: float = typer.Option(None, "--holding-months", help="Months held before resale"),
    monthly_holding: float = typer.Option(None, "--monthly-holding", help="Holding cost per month"),
    commission_pct: float = typer.Option(None, "--commission-pct", help="Selling commission, % of ARV"),
    profit_pct: float = typer.Option(None, "--profit-pct", help="Target profit, % of ARV"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config TOML file"),
    as_json: bool = typer.Option(False, "--json", help="Print metrics as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Analyze a property for flip and rental potential."""
    setup_logging(verbose)
    cfg = _load(config_path)

    rental = cfg.rental.model_copy(
        update=_overrides(
            monthly_rent=rent,
            vacancy_rate=vacancy,
            management_fee=management,
            maintenance_rate=maintenance,
            insurance_annual=insurance,
            property_tax_annual=tax,
            hoa_monthly=hoa,
            loan_amount=loan,
            interest_rate=rate,
            loan_term_years=term,
        )
    )
    criteria = cfg.buying_criteria.model_copy(
        update=_overrides(
            closing_expenses_pct=closing_pct,
            holding_months=holding_months,
            monthly_holding_cost=monthly_holding,
            selling_commission_pct=commission_pct,
            your_profit_pct=profit_pct,
        )
    )

    prop = Property(address=address, purchase_price=price, repair_cost=repair, arv=arv)
    metrics = DealAnalyzer(cfg).analyze(prop, rental, criteria)

    if as_json:
        typer.echo(metrics.model_dump_json(by_alias=True, indent=2))
        return

    _display_metrics_table(metrics)
    verdict = "meets" if meets_criteria(metrics, criteria) else "misses"
    console.print(Panel(summarize(metrics, address), title=f"Deal Analysis - {verdict} criteria"))


def _display_metrics_table(m: DealMetrics) -> None:
    """Display metrics in a rich table."""
    table = Table(title="Deal Metrics", show_lines=False)
    table.add_column("Metric", style="white")
    table.add_column("Value", style="bold", justify="right")

    rows = [
        ("Purchase Price", format_currency(m.purchase_price)),
        ("Repair Cost", format_currency(m.repair_cost)),
        ("Closing Costs", format_currency(m.closing_costs)),
        ("Holding Costs", format_currency(m.holding_costs)),
        ("Total Investment", format_currency(m.total_investment)),
        ("ARV", format_currency(m.arv)),
        ("Gross Profit", format_currency(m.gross_profit)),
        ("Net Profit", format_currency(m.net_profit)),
        ("ROI", format_percentage(m.roi)),
        ("MAO", format_currency(m.mao)),
    ]
    if m.has_rental_data:
        rows += [
            ("Monthly Rent", format_currency(m.monthly_rent)),
            ("Monthly Expenses", format_currency(m.monthly_expenses)),
            ("Monthly Mortgage", format_currency(m.monthly_mortgage)),
            ("Monthly Cash Flow", format_currency(m.monthly_cash_flow)),
            ("Annual Cash Flow", format_currency(m.annual_cash_flow)),
            ("Cash-on-Cash", format_percentage(m.cash_on_cash_return)),
            ("Cap Rate", format_percentage(m.cap_rate)),
            ("GRM", f"{m.gross_rent_multiplier:.2f}"),
        ]

    for label, value in rows:
        if value.startswith("-"):
            value = f"[red]{value}[/red]"
        table.add_row(label, value)

    console.print(table)


@app.command()
def config_show(
    config_path: Path = typer.Option(None, "--config", "-c"),
):
    """Display current configuration."""
    cfg = _load(config_path)
    console.print_json(json.dumps(cfg.model_dump(), indent=2, default=str))


if __name__ == "__main__":
    app()
