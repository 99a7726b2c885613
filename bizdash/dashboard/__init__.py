"""Dashboard — сводка месяца, карточки, ряды графика и рейтинг товаров.

Собирает метрики и форматтеры core в данные, готовые для виджетов.
"""

from .loaders import load_inventory, load_purchases, load_sales
from .products import (
    TOP_PRODUCTS,
    rank_products,
    split_products,
    tally_products,
    top_products,
)
from .series import build_financial_series, shift_month
from .summary import (
    ATTENTION_NOTE,
    SUMMARY_CARDS,
    CardDefinition,
    MonthBounds,
    build_period_summary,
    build_summary_cards,
    format_card_value,
    month_bounds,
    summarize_month,
)

__all__ = [
    # Loaders
    "load_sales",
    "load_purchases",
    "load_inventory",
    # Summary
    "ATTENTION_NOTE",
    "SUMMARY_CARDS",
    "CardDefinition",
    "MonthBounds",
    "month_bounds",
    "build_period_summary",
    "summarize_month",
    "format_card_value",
    "build_summary_cards",
    # Series
    "build_financial_series",
    "shift_month",
    # Products
    "TOP_PRODUCTS",
    "split_products",
    "tally_products",
    "rank_products",
    "top_products",
]
