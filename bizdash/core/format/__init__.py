"""
Formatting modules для bizdash

Локализованные строки для виджетов и обратный разбор денежных сумм.
"""

# Locale port
from bizdash.core.format.locale_port import (
    DEFAULT_LOCALE_FORMATTER,
    BabelLocaleFormatter,
    LocaleFormatter,
)

# Formatters
from bizdash.core.format.formatters import (
    DATE_PATTERN,
    INVALID_DISPLAY,
    MAGNITUDE_THRESHOLDS,
    PERCENT_FRACTION_DIGITS,
    format_currency,
    format_dashboard_currency,
    format_date,
    format_number,
    format_percent,
    parse_date,
)

# Currency parser
from bizdash.core.format.parsing import parse_currency, strip_currency_text

__all__ = [
    # Locale port
    "DEFAULT_LOCALE_FORMATTER",
    "BabelLocaleFormatter",
    "LocaleFormatter",
    # Formatters — Constants
    "DATE_PATTERN",
    "INVALID_DISPLAY",
    "MAGNITUDE_THRESHOLDS",
    "PERCENT_FRACTION_DIGITS",
    # Formatters — Functions
    "format_currency",
    "format_dashboard_currency",
    "format_date",
    "format_number",
    "format_percent",
    "parse_date",
    # Currency parser
    "parse_currency",
    "strip_currency_text",
]
