"""Fix-and-flip deal analysis."""

from __future__ import annotations

import logging

from dealiq.models import BuyingCriteria, FlipConstants, FlipMetrics

logger = logging.getLogger(__name__)

DEFAULT_FLIP_CONSTANTS = FlipConstants()


def resolve_flip_rates(
    purchase_price: float,
    criteria: BuyingCriteria | None = None,
) -> tuple[float, float, float, float]:
    """Resolve the flip rates against the investor's buying criteria.

    Returns ``(closing_costs_pct, holding_costs, selling_costs_pct,
    mao_rule_pct)``. Holding costs come back as a dollar amount, not a rate.
    """
    c = criteria or BuyingCriteria()
    defaults = DEFAULT_FLIP_CONSTANTS

    if c.closing_expenses_pct is not None:
        closing_costs_pct = c.closing_expenses_pct / 100
    else:
        closing_costs_pct = defaults.closing_costs_pct

    # Months x monthly cost only when both are set
    if c.holding_months and c.monthly_holding_cost:
        holding_costs = c.holding_months * c.monthly_holding_cost
    else:
        holding_costs = purchase_price * defaults.holding_costs_pct

    if c.selling_commission_pct is not None:
        selling_costs_pct = c.selling_commission_pct / 100
    else:
        selling_costs_pct = defaults.selling_costs_pct

    # The profit target nets out the resolved selling commission
    if c.your_profit_pct is not None:
        mao_rule_pct = 1 - c.your_profit_pct / 100 - selling_costs_pct
    else:
        mao_rule_pct = defaults.mao_rule_pct

    logger.debug(
        "Flip rates: closing=%.4f holding=%.2f selling=%.4f mao_rule=%.4f",
        closing_costs_pct,
        holding_costs,
        selling_costs_pct,
        mao_rule_pct,
    )
    return closing_costs_pct, holding_costs, selling_costs_pct, mao_rule_pct


def analyze_flip(
    purchase_price: float,
    repair_cost: float,
    arv: float,
    criteria: BuyingCriteria | None = None,
) -> FlipMetrics:
    """Profit, ROI and maximum allowable offer for a buy-rehab-resell."""
    closing_pct, holding_costs, selling_pct, mao_rule_pct = resolve_flip_rates(
        purchase_price, criteria
    )

    closing_costs = purchase_price * closing_pct
    total_investment = purchase_price + repair_cost + closing_costs + holding_costs

    selling_costs = arv * selling_pct
    gross_profit = arv - total_investment
    net_profit = arv - total_investment - selling_costs
    roi = (net_profit / total_investment) * 100 if total_investment > 0 else 0

    # MAO uses the percentage rule on ARV only, not the cost build-up above
    mao = arv * mao_rule_pct - repair_cost if arv > 0 else 0

    return FlipMetrics(
        closing_costs=closing_costs,
        holding_costs=holding_costs,
        total_investment=total_investment,
        selling_costs=selling_costs,
        gross_profit=gross_profit,
        net_profit=net_profit,
        roi=roi,
        mao=mao,
    )
