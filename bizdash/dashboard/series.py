"""Financial Chart — ряды выручки, расходов и прибыли

Горизонты:
- week: 7 дневных бакетов, заканчивая сегодняшним днём
- month: 30 дневных бакетов, заканчивая сегодняшним днём
- year: 12 месячных бакетов, заканчивая текущим месяцем

Подписи: "dd/MM" для дней, "MMM y" для месяцев (es-ES: "sept 2024").
Записи вне окна игнорируются. Прибыль бакета = выручка - расходы.
"""

from collections import OrderedDict
from datetime import date, timedelta
from typing import Final, Iterable, Optional, Union

import structlog

from bizdash.core.domain.options import DASHBOARD_LOCALE
from bizdash.core.domain.records import PurchaseRecord, SaleRecord
from bizdash.core.domain.summary import FinancialSeries, Timeframe
from bizdash.core.format.locale_port import DEFAULT_LOCALE_FORMATTER, LocaleFormatter

logger = structlog.get_logger(__name__)

DAILY_BUCKETS: Final[dict[Timeframe, int]] = {
    Timeframe.WEEK: 7,
    Timeframe.MONTH: 30,
}

MONTHLY_BUCKETS: Final[int] = 12

DAY_LABEL_PATTERN: Final[str] = "dd/MM"

MONTH_LABEL_PATTERN: Final[str] = "MMM y"


def shift_month(day: date, months: int) -> date:
    """Первое число месяца, отстоящего от `day` на `months` месяцев."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def _daily_buckets(today: date, days: int, locale: str, formatter: LocaleFormatter):
    buckets: "OrderedDict[str, str]" = OrderedDict()
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        buckets[day.isoformat()] = formatter.date(day, DAY_LABEL_PATTERN, locale)
    return buckets


def _monthly_buckets(today: date, locale: str, formatter: LocaleFormatter):
    buckets: "OrderedDict[str, str]" = OrderedDict()
    for i in range(MONTHLY_BUCKETS):
        month = shift_month(today, i - (MONTHLY_BUCKETS - 1))
        buckets[month.isoformat()[:7]] = formatter.date(month, MONTH_LABEL_PATTERN, locale)
    return buckets


def build_financial_series(
    sales: Iterable[SaleRecord],
    purchases: Iterable[PurchaseRecord],
    timeframe: Union[Timeframe, str],
    today: date,
    *,
    locale: str = DASHBOARD_LOCALE,
    formatter: Optional[LocaleFormatter] = None,
) -> FinancialSeries:
    """Агрегация продаж и закупок по бакетам графика.

    Args:
        sales: Продажи
        purchases: Закупки
        timeframe: week / month / year
        today: Последний день окна
        locale: Локаль подписей (default: es-ES)
        formatter: Locale-примитив (default: Babel)

    Returns:
        FinancialSeries с рядами одинаковой длины

    Raises:
        ValueError: Если timeframe неизвестен
    """
    try:
        timeframe = Timeframe(timeframe)
    except ValueError:
        raise ValueError(
            f"Unknown timeframe: {timeframe!r} (expected one of "
            f"{', '.join(t.value for t in Timeframe)})"
        ) from None

    backend = formatter or DEFAULT_LOCALE_FORMATTER

    if timeframe is Timeframe.YEAR:
        buckets = _monthly_buckets(today, locale, backend)
        key_length = 7  # YYYY-MM
    else:
        buckets = _daily_buckets(today, DAILY_BUCKETS[timeframe], locale, backend)
        key_length = 10  # YYYY-MM-DD

    revenue = dict.fromkeys(buckets, 0.0)
    expenses = dict.fromkeys(buckets, 0.0)

    for sale in sales:
        key = sale.fecha.isoformat()[:key_length]
        if key in revenue:
            revenue[key] += sale.total

    for purchase in purchases:
        key = purchase.fecha_compra.isoformat()[:key_length]
        if key in expenses:
            expenses[key] += purchase.total

    keys = list(buckets)
    logger.debug("Built financial series", timeframe=timeframe.value, buckets=len(keys))

    return FinancialSeries(
        timeframe=timeframe,
        keys=keys,
        labels=list(buckets.values()),
        revenue=[revenue[k] for k in keys],
        expenses=[expenses[k] for k in keys],
        profit=[revenue[k] - expenses[k] for k in keys],
    )
