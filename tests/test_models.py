"""Tests for data models."""

import pytest
from pydantic import ValidationError

from dealiq.models import BuyingCriteria, DealMetrics, Property, RentalAssumptions


def test_property_ignores_extra_fields():
    prop = Property(
        id="prop-123",
        address="123 Main St",
        city="Austin",
        state="TX",
        purchase_price=200_000,
    )
    assert prop.purchase_price == 200_000
    assert prop.repair_cost is None
    assert not hasattr(prop, "city")


def test_rental_assumption_defaults():
    a = RentalAssumptions()
    assert a.monthly_rent == 0
    assert a.vacancy_rate == 8
    assert a.management_fee == 10
    assert a.maintenance_rate == 5
    assert a.hoa_monthly == 0
    assert a.loan_term_years == 30


def test_rental_assumptions_accept_camel_case():
    a = RentalAssumptions.model_validate({"monthlyRent": 1_800, "loanTermYears": 15})
    assert a.monthly_rent == 1_800
    assert a.loan_term_years == 15
    assert a.interest_rate == 7


def test_rental_assumptions_reject_unknown_keys():
    with pytest.raises(ValidationError):
        RentalAssumptions.model_validate({"monthlyRnet": 1_800})


def test_buying_criteria_all_optional():
    c = BuyingCriteria()
    assert c.model_dump(exclude_none=True) == {}


def test_buying_criteria_camel_case_names():
    c = BuyingCriteria.model_validate(
        {
            "yourProfitPct": 25,
            "sellingCommissionPct": 5,
            "closingExpensesPct": 3,
            "holdingMonths": 6,
            "monthlyHoldingCost": 1_500,
            "minCapRatePct": 6,
            "minCoCPct": 8,
            "maxLTVPct": 80,
        }
    )
    assert c.your_profit_pct == 25
    assert c.min_coc_pct == 8
    assert c.max_ltv_pct == 80


def test_deal_metrics_defaults():
    m = DealMetrics()
    assert m.mao == 0
    assert m.has_flip_data is False
    assert m.has_rental_data is False


def test_rental_assumptions_null_fields_count_as_zero():
    a = RentalAssumptions.model_validate(
        {"monthlyRent": 2_000, "hoaMonthly": None, "loanAmount": None, "vacancyRate": None}
    )
    assert a.monthly_rent == 2_000
    assert a.hoa_monthly == 0
    assert a.loan_amount == 0
    assert a.vacancy_rate == 0
    assert a.management_fee == 10


def test_rental_assumptions_fractional_term():
    assert RentalAssumptions(loan_term_years=15.5).loan_term_years == 15.5


def test_buying_criteria_null_fields():
    c = BuyingCriteria.model_validate({"closingExpensesPct": None, "minCoCPct": None})
    assert c.closing_expenses_pct is None
    assert c.min_coc_pct is None


def test_property_null_address():
    assert Property(address=None, arv=300_000).address is None
