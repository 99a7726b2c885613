"""
Core math modules для bizdash

Численные примитивы и производные метрики дашборда.
"""

# Numerical Safeguards
from bizdash.core.math.numerical_safeguards import (
    is_valid_float,
    round_half_up,
    safe_divide,
    sanitize_float,
    to_fixed,
)

# Metrics
from bizdash.core.math.metrics import (
    DEFAULT_CHANGE_SUFFIX,
    GROWTH_FROM_ZERO_PCT,
    StockLevel,
    calculate_average_ticket,
    calculate_percent_change,
    calculate_profit_margin,
    count_low_stock,
    format_change_label,
    is_favorable_change,
)

__all__ = [
    # Numerical Safeguards
    "is_valid_float",
    "round_half_up",
    "safe_divide",
    "sanitize_float",
    "to_fixed",
    # Metrics — Constants
    "DEFAULT_CHANGE_SUFFIX",
    "GROWTH_FROM_ZERO_PCT",
    # Metrics — Types
    "StockLevel",
    # Metrics — Functions
    "calculate_average_ticket",
    "calculate_percent_change",
    "calculate_profit_margin",
    "count_low_stock",
    "format_change_label",
    "is_favorable_change",
]
