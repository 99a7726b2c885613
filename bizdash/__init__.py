"""
bizdash — formatting & derived metrics for the business dashboard.

Public surface:
- format_currency / format_percent / format_number / format_date
- calculate_percent_change
- parse_currency
"""

from bizdash.core.format import (
    format_currency,
    format_dashboard_currency,
    format_date,
    format_number,
    format_percent,
    parse_currency,
)
from bizdash.core.math import calculate_percent_change

__version__ = "1.0.0"

__all__ = [
    "format_currency",
    "format_dashboard_currency",
    "format_date",
    "format_number",
    "format_percent",
    "calculate_percent_change",
    "parse_currency",
]
