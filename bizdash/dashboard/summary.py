"""Financial Summary — сводка месяца и карточки дашборда

Считает метрики текущего месяца относительно предыдущего:
- Выручка и расходы (суммы total)
- Маржа прибыли и средний чек
- Количество продаж
- Позиции склада ниже минимума

и превращает их в шесть карточек с отформатированным значением,
изменением в процентах и признаком благоприятного изменения.

Периоды:
- текущий: с первого числа текущего месяца (без верхней границы)
- предыдущий: с первого по последнее число предыдущего месяца
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Final, Iterable, Optional, Sequence

import structlog

from bizdash.core.domain.options import DASHBOARD_FORMAT_OPTIONS, FormatOptions
from bizdash.core.domain.records import InventoryItem, PurchaseRecord, SaleRecord
from bizdash.core.domain.summary import CardFormat, PeriodSummary, SummaryCard
from bizdash.core.format.formatters import format_currency, format_percent
from bizdash.core.format.locale_port import LocaleFormatter
from bizdash.core.math.metrics import (
    DEFAULT_CHANGE_SUFFIX,
    calculate_average_ticket,
    calculate_percent_change,
    calculate_profit_margin,
    count_low_stock,
    format_change_label,
    is_favorable_change,
)

logger = structlog.get_logger(__name__)

# Подпись карточки без сравнения
ATTENTION_NOTE: Final[str] = "Requiere atención"


# =============================================================================
# PERIODS
# =============================================================================


@dataclass(frozen=True)
class MonthBounds:
    """Границы текущего и предыдущего месяца."""

    current_start: date
    previous_start: date
    previous_end: date


def month_bounds(today: date) -> MonthBounds:
    """Первое число текущего месяца и границы предыдущего."""
    current_start = today.replace(day=1)
    previous_end = current_start - timedelta(days=1)
    return MonthBounds(
        current_start=current_start,
        previous_start=previous_end.replace(day=1),
        previous_end=previous_end,
    )


# =============================================================================
# SUMMARY
# =============================================================================


def _total(records: Iterable) -> float:
    return sum((record.total for record in records), 0.0)


def build_period_summary(
    current_sales: Sequence[SaleRecord],
    previous_sales: Sequence[SaleRecord],
    current_purchases: Sequence[PurchaseRecord],
    previous_purchases: Sequence[PurchaseRecord],
    inventory: Iterable[InventoryItem] = (),
) -> PeriodSummary:
    """Сводка по уже разбитым на периоды записям.

    Args:
        current_sales: Продажи текущего периода
        previous_sales: Продажи предыдущего периода
        current_purchases: Закупки текущего периода
        previous_purchases: Закупки предыдущего периода
        inventory: Ингредиенты склада (для счётчика дефицита)

    Returns:
        PeriodSummary
    """
    current_revenue = _total(current_sales)
    previous_revenue = _total(previous_sales)
    current_expenses = _total(current_purchases)
    previous_expenses = _total(previous_purchases)

    return PeriodSummary(
        total_revenue=current_revenue,
        previous_revenue=previous_revenue,
        total_expenses=current_expenses,
        previous_expenses=previous_expenses,
        profit_margin=calculate_profit_margin(current_revenue, current_expenses),
        previous_profit_margin=calculate_profit_margin(previous_revenue, previous_expenses),
        average_ticket=calculate_average_ticket(current_revenue, len(current_sales)),
        previous_average_ticket=calculate_average_ticket(previous_revenue, len(previous_sales)),
        total_sales=len(current_sales),
        previous_sales=len(previous_sales),
        low_stock_items=count_low_stock(inventory),
    )


def summarize_month(
    sales: Iterable[SaleRecord],
    purchases: Iterable[PurchaseRecord],
    today: date,
    inventory: Iterable[InventoryItem] = (),
) -> PeriodSummary:
    """Сводка текущего месяца против предыдущего.

    Записи вне обоих периодов (раньше предыдущего месяца) игнорируются.
    """
    bounds = month_bounds(today)
    sales = list(sales)
    purchases = list(purchases)

    current_sales = [s for s in sales if s.fecha >= bounds.current_start]
    previous_sales = [
        s for s in sales if bounds.previous_start <= s.fecha <= bounds.previous_end
    ]
    current_purchases = [p for p in purchases if p.fecha_compra >= bounds.current_start]
    previous_purchases = [
        p
        for p in purchases
        if bounds.previous_start <= p.fecha_compra <= bounds.previous_end
    ]

    logger.debug(
        "Summarizing month",
        current_start=bounds.current_start.isoformat(),
        current_sales=len(current_sales),
        previous_sales=len(previous_sales),
        current_purchases=len(current_purchases),
        previous_purchases=len(previous_purchases),
    )

    return build_period_summary(
        current_sales,
        previous_sales,
        current_purchases,
        previous_purchases,
        inventory,
    )


# =============================================================================
# CARDS
# =============================================================================


@dataclass(frozen=True)
class CardDefinition:
    """Описание карточки: откуда брать значения и как их трактовать."""

    key: str
    title: str
    value_format: CardFormat
    current: Callable[[PeriodSummary], float]
    previous: Callable[[PeriodSummary], float]
    lower_is_better: bool = False
    comparable: bool = True


SUMMARY_CARDS: Final[tuple[CardDefinition, ...]] = (
    CardDefinition(
        key="revenue",
        title="Ingresos Totales",
        value_format=CardFormat.CURRENCY,
        current=lambda s: s.total_revenue,
        previous=lambda s: s.previous_revenue,
    ),
    CardDefinition(
        key="expenses",
        title="Gastos Totales",
        value_format=CardFormat.CURRENCY,
        current=lambda s: s.total_expenses,
        previous=lambda s: s.previous_expenses,
        lower_is_better=True,
    ),
    CardDefinition(
        key="profit_margin",
        title="Margen de Beneficio",
        value_format=CardFormat.PERCENT,
        current=lambda s: s.profit_margin,
        previous=lambda s: s.previous_profit_margin,
    ),
    CardDefinition(
        key="average_ticket",
        title="Ticket Promedio",
        value_format=CardFormat.CURRENCY,
        current=lambda s: s.average_ticket,
        previous=lambda s: s.previous_average_ticket,
    ),
    CardDefinition(
        key="sales_count",
        title="Total Ventas",
        value_format=CardFormat.COUNT,
        current=lambda s: s.total_sales,
        previous=lambda s: s.previous_sales,
    ),
    CardDefinition(
        key="low_stock",
        title="Inventario Bajo",
        value_format=CardFormat.COUNT,
        current=lambda s: s.low_stock_items,
        previous=lambda s: 0,
        lower_is_better=True,
        comparable=False,
    ),
)


def format_card_value(
    value: float,
    value_format: CardFormat,
    options: FormatOptions = DASHBOARD_FORMAT_OPTIONS,
    formatter: Optional[LocaleFormatter] = None,
) -> str:
    """Отображаемое значение карточки по её формату."""
    if value_format is CardFormat.CURRENCY:
        return format_currency(value, options=options, formatter=formatter)
    if value_format is CardFormat.PERCENT:
        return format_percent(value, locale=options.locale, formatter=formatter)
    return str(int(value))


def build_summary_cards(
    summary: PeriodSummary,
    options: FormatOptions = DASHBOARD_FORMAT_OPTIONS,
    formatter: Optional[LocaleFormatter] = None,
    change_suffix: str = DEFAULT_CHANGE_SUFFIX,
) -> list[SummaryCard]:
    """Шесть карточек сводки в порядке отображения.

    Args:
        summary: Сводка периода
        options: Конфигурация денежных сумм (default: USD / es-ES)
        formatter: Locale-примитив (default: Babel)
        change_suffix: Подпись сравнения ("vs mes anterior")

    Returns:
        Список SummaryCard
    """
    cards = []
    for definition in SUMMARY_CARDS:
        value = float(definition.current(summary))
        previous = float(definition.previous(summary))
        display_value = format_card_value(value, definition.value_format, options, formatter)

        if not definition.comparable:
            cards.append(
                SummaryCard(
                    key=definition.key,
                    title=definition.title,
                    value_format=definition.value_format,
                    value=value,
                    previous_value=previous,
                    display_value=display_value,
                    comparable=False,
                    note=ATTENTION_NOTE,
                )
            )
            continue

        change = calculate_percent_change(value, previous)
        cards.append(
            SummaryCard(
                key=definition.key,
                title=definition.title,
                value_format=definition.value_format,
                value=value,
                previous_value=previous,
                display_value=display_value,
                comparable=True,
                change=change,
                change_label=format_change_label(change, suffix=change_suffix),
                favorable=is_favorable_change(change, lower_is_better=definition.lower_is_better),
            )
        )

    return cards
