"""
Domain models and value objects.

Contains format configuration, raw sales/purchase/inventory records and
the dashboard summary models.
"""

from bizdash.core.domain.options import (
    DASHBOARD_FORMAT_OPTIONS,
    DASHBOARD_LOCALE,
    DEFAULT_CURRENCY,
    DEFAULT_FORMAT_OPTIONS,
    DEFAULT_LOCALE,
    FormatOptions,
    parse_locale_tag,
)
from bizdash.core.domain.records import InventoryItem, PurchaseRecord, SaleRecord
from bizdash.core.domain.summary import (
    CardFormat,
    FinancialSeries,
    PeriodSummary,
    ProductPerformance,
    SummaryCard,
    Timeframe,
)

__all__ = [
    # Format options
    "DEFAULT_CURRENCY",
    "DEFAULT_LOCALE",
    "DASHBOARD_LOCALE",
    "DEFAULT_FORMAT_OPTIONS",
    "DASHBOARD_FORMAT_OPTIONS",
    "FormatOptions",
    "parse_locale_tag",
    # Records
    "SaleRecord",
    "PurchaseRecord",
    "InventoryItem",
    # Summary
    "CardFormat",
    "Timeframe",
    "PeriodSummary",
    "SummaryCard",
    "FinancialSeries",
    "ProductPerformance",
]
