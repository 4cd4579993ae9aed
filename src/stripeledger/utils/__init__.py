"""Utility functions for stripeledger."""

from stripeledger.utils.periods import format_period, month_choices, parse_month, period_for_month
from stripeledger.utils.amounts import format_amount, to_major_units

__all__ = [
    "format_period",
    "month_choices",
    "parse_month",
    "period_for_month",
    "format_amount",
    "to_major_units",
]
