"""Check derived metrics against the investor's minimum returns."""

from __future__ import annotations

from dealiq.models import BuyingCriteria, DealMetrics


def meets_criteria(m: DealMetrics, criteria: BuyingCriteria | None = None) -> bool:
    """True when the rental returns clear the configured minimums.

    Thresholds only apply once rent is known; a property without rental data
    is not rejected on cap rate or cash-on-cash return.
    """
    if criteria is None or not m.has_rental_data:
        return True
    if criteria.min_cap_rate_pct is not None and m.cap_rate < criteria.min_cap_rate_pct:
        return False
    if criteria.min_coc_pct is not None and m.cash_on_cash_return < criteria.min_coc_pct:
        return False
    return True
