"""Fixed-rate mortgage math."""

from __future__ import annotations

from dealiq.analysis.rounding import round_half_up


def monthly_payment(principal: float, annual_rate: float, years: float) -> float:
    """Amortized monthly payment, rounded to cents.

    ``annual_rate`` is a whole percent (7 means 7%). Returns 0 for a
    non-positive principal, rate or term.
    """
    if principal <= 0 or annual_rate <= 0 or years <= 0:
        return 0.0
    monthly_rate = annual_rate / 100 / 12
    num_payments = years * 12
    growth = (1 + monthly_rate) ** num_payments
    if growth == 1:
        # rate too small to register in float math
        return round_half_up(principal / num_payments, 2)
    payment = principal * (monthly_rate * growth) / (growth - 1)
    return round_half_up(payment, 2)
