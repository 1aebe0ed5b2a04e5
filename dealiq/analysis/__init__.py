"""Deal analysis engine for evaluating flip and rental potential."""

from dealiq.analysis.engine import DealAnalyzer, compute
from dealiq.analysis.cashflow import DEFAULT_LTV, DEFAULT_RENTAL_ASSUMPTIONS, analyze_rental
from dealiq.analysis.flip import DEFAULT_FLIP_CONSTANTS, analyze_flip, resolve_flip_rates
from dealiq.analysis.mortgage import monthly_payment
from dealiq.analysis.rounding import round_half_up
from dealiq.analysis.criteria import meets_criteria
from dealiq.analysis.summary import format_currency, format_percentage, summarize
