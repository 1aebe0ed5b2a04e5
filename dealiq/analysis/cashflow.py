"""Cash flow analysis for the buy-and-hold rental strategy."""

from __future__ import annotations

from dealiq.models import RentalAssumptions, RentalMetrics
from dealiq.analysis.mortgage import monthly_payment

DEFAULT_LTV = 0.80
DEFAULT_RENTAL_ASSUMPTIONS = RentalAssumptions()


def analyze_rental(
    purchase_price: float,
    repair_cost: float,
    arv: float,
    closing_costs: float,
    assumptions: RentalAssumptions | None = None,
) -> RentalMetrics:
    """Evaluate a property as a financed rental.

    Expenses cover vacancy, management, maintenance, insurance, taxes and
    HOA. Debt service is kept out of NOI, so the cap rate is unlevered while
    cash flow and cash-on-cash return include the mortgage.
    """
    a = assumptions or DEFAULT_RENTAL_ASSUMPTIONS
    monthly_rent = a.monthly_rent

    # Expenses
    vacancy_loss = monthly_rent * (a.vacancy_rate / 100)
    management = monthly_rent * (a.management_fee / 100)
    maintenance = monthly_rent * (a.maintenance_rate / 100)
    monthly_insurance = a.insurance_annual / 12
    monthly_tax = a.property_tax_annual / 12
    monthly_expenses = (
        vacancy_loss
        + management
        + maintenance
        + monthly_insurance
        + monthly_tax
        + a.hoa_monthly
    )

    # Financing
    loan_amount = a.loan_amount or purchase_price * DEFAULT_LTV
    monthly_mortgage = monthly_payment(loan_amount, a.interest_rate, a.loan_term_years)

    # Cash flow
    monthly_cash_flow = monthly_rent - monthly_expenses - monthly_mortgage
    annual_cash_flow = monthly_cash_flow * 12

    # Cash-on-cash return
    cash_invested = purchase_price - loan_amount + closing_costs + repair_cost
    cash_on_cash = (annual_cash_flow / cash_invested) * 100 if cash_invested > 0 else 0

    # NOI and cap rate, valued at ARV when known
    noi = (monthly_rent - monthly_expenses) * 12
    property_value = arv if arv > 0 else purchase_price + repair_cost
    cap_rate = (noi / property_value) * 100 if property_value > 0 else 0

    grm = property_value / (monthly_rent * 12) if monthly_rent > 0 else 0

    return RentalMetrics(
        monthly_rent=monthly_rent,
        monthly_expenses=monthly_expenses,
        loan_amount=loan_amount,
        monthly_mortgage=monthly_mortgage,
        monthly_cash_flow=monthly_cash_flow,
        annual_cash_flow=annual_cash_flow,
        cash_invested=cash_invested,
        cash_on_cash_return=cash_on_cash,
        noi=noi,
        property_value=property_value,
        cap_rate=cap_rate,
        grm=grm,
    )
