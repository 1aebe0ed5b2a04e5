"""Data models for DealIQ."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Property(BaseModel):
    """A property record as stored by the app.

    Only the financial fields are read by the engine; anything else on the
    record (id, city, photos, ...) is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    address: Optional[str] = None
    purchase_price: Optional[float] = None
    repair_cost: Optional[float] = None
    arv: Optional[float] = None


class RentalAssumptions(BaseModel):
    """Rental inputs. Percentages are whole numbers (8 means 8%)."""

    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True
    )

    monthly_rent: float = 0.0
    vacancy_rate: float = 8.0
    management_fee: float = 10.0
    maintenance_rate: float = 5.0
    insurance_annual: float = 1200.0
    property_tax_annual: float = 3000.0
    hoa_monthly: float = 0.0
    loan_amount: float = 0.0  # 0 means 80% of purchase price
    interest_rate: float = 7.0
    loan_term_years: float = 30.0

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero(cls, v):
        # Saved settings rows carry nulls for cleared fields; they count as 0
        return 0.0 if v is None else v


class BuyingCriteria(BaseModel):
    """The investor's buying criteria from user settings.

    Every field is optional; a missing field leaves the matching engine
    default in place.
    """

    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True
    )

    your_profit_pct: Optional[float] = None
    selling_commission_pct: Optional[float] = None
    buyer_credit_pct: Optional[float] = None
    closing_expenses_pct: Optional[float] = None
    holding_months: Optional[float] = None
    buyers_profit_pct: Optional[float] = None
    max_interest_rate: Optional[float] = None
    monthly_holding_cost: Optional[float] = None
    misc_contingency_pct: Optional[float] = None
    min_cap_rate_pct: Optional[float] = None
    min_coc_pct: Optional[float] = Field(default=None, alias="minCoCPct")
    max_ltv_pct: Optional[float] = Field(default=None, alias="maxLTVPct")


class FlipConstants(BaseModel):
    """Fallback rates used when buying criteria leave a value unset."""

    model_config = ConfigDict(frozen=True)

    closing_costs_pct: float = 0.03
    holding_costs_pct: float = 0.02
    selling_costs_pct: float = 0.08
    mao_rule_pct: float = 0.70


class DealMetrics(BaseModel):
    """Flip and rental metrics derived for one property."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    # Purchase side
    purchase_price: float = 0
    repair_cost: float = 0
    closing_costs: float = 0
    holding_costs: float = 0
    total_investment: float = 0

    # Flip
    arv: float = 0
    gross_profit: float = 0
    net_profit: float = 0
    roi: float = 0  # percentage
    mao: float = 0

    # Rental
    monthly_rent: float = 0
    monthly_expenses: float = 0
    monthly_mortgage: float = 0
    monthly_cash_flow: float = 0
    annual_cash_flow: float = 0
    cash_on_cash_return: float = 0  # percentage
    cap_rate: float = 0  # percentage
    gross_rent_multiplier: float = 0

    has_flip_data: bool = False
    has_rental_data: bool = False


class FlipMetrics(BaseModel):
    """Unrounded fix-and-flip figures."""

    closing_costs: float
    holding_costs: float
    total_investment: float
    selling_costs: float
    gross_profit: float
    net_profit: float
    roi: float  # percentage
    mao: float


class RentalMetrics(BaseModel):
    """Unrounded buy-and-hold figures."""

    monthly_rent: float
    monthly_expenses: float
    loan_amount: float
    monthly_mortgage: float
    monthly_cash_flow: float
    annual_cash_flow: float
    cash_invested: float
    cash_on_cash_return: float  # percentage
    noi: float
    property_value: float
    cap_rate: float  # percentage
    grm: float  # gross rent multiplier
