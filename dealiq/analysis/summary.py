"""Human-readable rendering of deal metrics."""

from __future__ import annotations

from dealiq.models import DealMetrics


def format_currency(value: float) -> str:
    if value < 0:
        return f"-${abs(value):,.0f}"
    return f"${value:,.0f}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def summarize(m: DealMetrics, address: str = "") -> str:
    """Multi-line summary with a flip block and a rental block when available."""
    parts = [f"Deal Analysis for {address}" if address else "Deal Analysis"]

    if m.has_flip_data:
        parts += [
            f"Purchase: {format_currency(m.purchase_price)} | Repairs: {format_currency(m.repair_cost)}"
            f" | ARV: {format_currency(m.arv)}",
            f"Closing: {format_currency(m.closing_costs)} | Holding: {format_currency(m.holding_costs)}"
            f" | Total Investment: {format_currency(m.total_investment)}",
            f"Net Profit: {format_currency(m.net_profit)} | ROI: {format_percentage(m.roi)}"
            f" | MAO: {format_currency(m.mao)}",
        ]

    if m.has_rental_data:
        parts += [
            f"Monthly Rent: {format_currency(m.monthly_rent)} | Expenses: {format_currency(m.monthly_expenses)}"
            f" | Mortgage: {format_currency(m.monthly_mortgage)}",
            f"Monthly Cash Flow: {format_currency(m.monthly_cash_flow)}"
            f" | Annual: {format_currency(m.annual_cash_flow)}",
            f"Cap Rate: {format_percentage(m.cap_rate)} | CoC Return: {format_percentage(m.cash_on_cash_return)}"
            f" | GRM: {m.gross_rent_multiplier:.2f}",
        ]

    if not (m.has_flip_data or m.has_rental_data):
        parts.append("No financial data")

    return "\n".join(parts)
