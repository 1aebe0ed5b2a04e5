"""Tests for metric formatting and summaries."""

from dealiq.models import Property, RentalAssumptions
from dealiq.analysis import compute, format_currency, format_percentage, summarize


def test_format_currency():
    assert format_currency(1234.4) == "$1,234"
    assert format_currency(0) == "$0"
    assert format_currency(-1414) == "-$1,414"


def test_format_percentage():
    assert format_percentage(23.85) == "23.9%"
    assert format_percentage(-4) == "-4.0%"


def test_summary_flip_only():
    m = compute(Property(purchase_price=200_000, repair_cost=50_000, arv=350_000))
    text = summarize(m, "123 Main St")
    assert text.startswith("Deal Analysis for 123 Main St")
    assert "Net Profit: $62,000" in text
    assert "MAO: $195,000" in text
    assert "Monthly Rent" not in text


def test_summary_with_rental():
    m = compute(
        Property(purchase_price=200_000, repair_cost=50_000, arv=350_000),
        RentalAssumptions(monthly_rent=2_000, loan_amount=160_000),
    )
    text = summarize(m)
    assert "Monthly Cash Flow: $126" in text
    assert "Cap Rate: 4.1%" in text


def test_summary_without_data():
    assert "No financial data" in summarize(compute(Property()))
