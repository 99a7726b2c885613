"""Product Performance — рейтинг самых продаваемых товаров месяца

Товары продажи хранятся текстом (productos) через запятую или перевод
строки. Каждое непустое название — одна позиция: units += 1, а выручка
продажи делится поровну между всеми частями списка.

- share: доля позиций товара среди всех позиций периода, %
- growth: изменение units к предыдущему месяцу, с тем же правилом
  нулевой базы, что и calculate_percent_change (с нуля → 100.0)

Рейтинг по units по убыванию; при равенстве сохраняется порядок
первого появления товара.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Final, Iterable, Optional

import structlog

from bizdash.core.domain.options import DASHBOARD_LOCALE
from bizdash.core.domain.records import SaleRecord
from bizdash.core.domain.summary import ProductPerformance
from bizdash.core.format.formatters import format_percent
from bizdash.core.format.locale_port import LocaleFormatter
from bizdash.core.math.metrics import (
    calculate_percent_change,
    format_change_label,
    is_favorable_change,
)
from bizdash.core.math.numerical_safeguards import safe_divide

from .summary import month_bounds

logger = structlog.get_logger(__name__)

TOP_PRODUCTS: Final[int] = 5

_PRODUCT_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"[,\n]+")


@dataclass
class ProductTally:
    """Накопленные позиции и выручка одного товара."""

    units: int = 0
    revenue: float = 0.0


def split_products(text: str) -> list[str]:
    """
    Части списка товаров, обрезанные по краям (пустые сохраняются).

    Examples:
        >>> split_products("Café, Pan\\nJugo")
        ['Café', 'Pan', 'Jugo']
        >>> split_products("Pan,")
        ['Pan', '']
    """
    return [part.strip() for part in _PRODUCT_SEPARATOR.split(text)]


def tally_products(sales: Iterable[SaleRecord]) -> dict[str, ProductTally]:
    """Позиции и выручка по товарам, в порядке первого появления."""
    tallies: dict[str, ProductTally] = {}
    for sale in sales:
        parts = split_products(sale.productos)
        # Пустые части тоже делят сумму продажи
        share = safe_divide(sale.total, len(parts))
        for name in parts:
            if not name:
                continue
            tally = tallies.setdefault(name, ProductTally())
            tally.units += 1
            tally.revenue += share
    return tallies


def rank_products(
    current_sales: Iterable[SaleRecord],
    previous_sales: Iterable[SaleRecord],
    limit: int = TOP_PRODUCTS,
    *,
    locale: str = DASHBOARD_LOCALE,
    formatter: Optional[LocaleFormatter] = None,
) -> list[ProductPerformance]:
    """
    Топ товаров текущего периода с долей и ростом.

    Args:
        current_sales: Продажи текущего периода
        previous_sales: Продажи предыдущего периода
        limit: Размер рейтинга (default: 5)
        locale: Локаль подписи доли (default: es-ES)
        formatter: Locale-примитив (default: Babel)

    Returns:
        Не более limit строк ProductPerformance

    Raises:
        ValueError: Если limit < 0
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    current = tally_products(current_sales)
    previous = tally_products(previous_sales)
    total_units = sum(tally.units for tally in current.values())

    ranked = sorted(current.items(), key=lambda item: item[1].units, reverse=True)

    rows = []
    for name, tally in ranked[:limit]:
        share = safe_divide(tally.units, total_units) * 100.0
        previous_units = previous[name].units if name in previous else 0
        growth = calculate_percent_change(tally.units, previous_units)
        rows.append(
            ProductPerformance(
                name=name,
                units=tally.units,
                revenue=tally.revenue,
                share=share,
                growth=growth,
                growth_label=format_change_label(growth, suffix=""),
                share_label=format_percent(share, locale=locale, formatter=formatter),
                favorable=is_favorable_change(growth),
            )
        )

    logger.debug("Ranked products", products=len(current), shown=len(rows))
    return rows


def top_products(
    sales: Iterable[SaleRecord],
    today: date,
    limit: int = TOP_PRODUCTS,
    *,
    locale: str = DASHBOARD_LOCALE,
    formatter: Optional[LocaleFormatter] = None,
) -> list[ProductPerformance]:
    """Рейтинг текущего месяца против предыдущего (периоды как в summarize_month)."""
    bounds = month_bounds(today)
    sales = list(sales)
    current = [s for s in sales if s.fecha >= bounds.current_start]
    previous = [s for s in sales if bounds.previous_start <= s.fecha <= bounds.previous_end]
    return rank_products(current, previous, limit, locale=locale, formatter=formatter)
