"""Main deal analysis engine that combines the flip and rental analyses."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from dealiq.config import AppConfig
from dealiq.models import BuyingCriteria, DealMetrics, Property, RentalAssumptions
from dealiq.analysis.cashflow import analyze_rental
from dealiq.analysis.flip import analyze_flip
from dealiq.analysis.rounding import round_half_up

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _coerce(model: type[ModelT], value: ModelT | Mapping[str, Any] | None) -> ModelT | None:
    if value is None or isinstance(value, model):
        return value
    return model.model_validate(dict(value))


def compute(
    prop: Property | Mapping[str, Any] | None,
    rental_assumptions: RentalAssumptions | Mapping[str, Any] | None = None,
    buying_criteria: BuyingCriteria | Mapping[str, Any] | None = None,
) -> DealMetrics:
    """Derive flip and rental metrics for a property.

    Args:
        prop: The property record. Missing or zero financial fields count as 0.
        rental_assumptions: Rental inputs; unset fields keep their defaults.
        buying_criteria: Investor settings overriding the flip defaults.

    Dollar amounts are rounded to whole units; ``roi``, ``cash_on_cash_return``,
    ``cap_rate`` and ``gross_rent_multiplier`` to two decimals, with halves
    rounding up. Every ratio is guarded so degenerate inputs yield 0 rather
    than NaN or infinity.
    """
    p = _coerce(Property, prop) or Property()
    assumptions = _coerce(RentalAssumptions, rental_assumptions) or RentalAssumptions()
    criteria = _coerce(BuyingCriteria, buying_criteria)

    purchase_price = p.purchase_price or 0
    repair_cost = p.repair_cost or 0
    arv = p.arv or 0

    flip = analyze_flip(purchase_price, repair_cost, arv, criteria)
    rental = analyze_rental(
        purchase_price, repair_cost, arv, flip.closing_costs, assumptions
    )

    return DealMetrics(
        purchase_price=round_half_up(purchase_price),
        repair_cost=round_half_up(repair_cost),
        closing_costs=round_half_up(flip.closing_costs),
        holding_costs=round_half_up(flip.holding_costs),
        total_investment=round_half_up(flip.total_investment),
        arv=round_half_up(arv),
        gross_profit=round_half_up(flip.gross_profit),
        net_profit=round_half_up(flip.net_profit),
        roi=round_half_up(flip.roi, 2),
        mao=round_half_up(flip.mao),
        monthly_rent=round_half_up(rental.monthly_rent),
        monthly_expenses=round_half_up(rental.monthly_expenses),
        monthly_mortgage=round_half_up(rental.monthly_mortgage),
        monthly_cash_flow=round_half_up(rental.monthly_cash_flow),
        annual_cash_flow=round_half_up(rental.annual_cash_flow),
        cash_on_cash_return=round_half_up(rental.cash_on_cash_return, 2),
        cap_rate=round_half_up(rental.cap_rate, 2),
        gross_rent_multiplier=round_half_up(rental.grm, 2),
        has_flip_data=purchase_price > 0 or arv > 0,
        has_rental_data=rental.monthly_rent > 0,
    )


class DealAnalyzer:
    """Runs the engine with the user's saved assumptions and criteria."""

    def __init__(self, config: AppConfig):
        self.config = config

    def analyze(
        self,
        prop: Property | Mapping[str, Any],
        rental_assumptions: RentalAssumptions | Mapping[str, Any] | None = None,
        buying_criteria: BuyingCriteria | Mapping[str, Any] | None = None,
    ) -> DealMetrics:
        """Analyze one property, falling back to the configured settings."""
        rental = rental_assumptions if rental_assumptions is not None else self.config.rental
        criteria = buying_criteria if buying_criteria is not None else self.config.buying_criteria
        metrics = compute(prop, rental, criteria)
        logger.debug(
            "Analyzed property: net_profit=%s mao=%s cash_flow=%s",
            metrics.net_profit,
            metrics.mao,
            metrics.monthly_cash_flow,
        )
        return metrics
