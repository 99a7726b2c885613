"""
Formatters — отображаемые строки для виджетов дашборда

Преобразует числа и даты в локализованные строки:
- format_currency: денежная сумма, ровно 2 знака после запятой
- format_percent: процент из шкалы 0–100, ровно 1 знак
- format_number: сокращение K/M/B для больших величин
- format_date: календарная дата "d MMM y" (5 sept 2024)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции чистые и тотальные: для данных не бросают исключений
2. NaN/Inf и нераспознанные даты → INVALID_DISPLAY (с warning в лог)
3. Locale-примитив передаётся явно (formatter=...), по умолчанию Babel
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Final, Optional, Union

import structlog

from bizdash.core.domain.options import (
    DASHBOARD_FORMAT_OPTIONS,
    DASHBOARD_LOCALE,
    DEFAULT_FORMAT_OPTIONS,
    FormatOptions,
)
from bizdash.core.format.locale_port import DEFAULT_LOCALE_FORMATTER, LocaleFormatter
from bizdash.core.math.numerical_safeguards import is_valid_float, to_fixed

logger = structlog.get_logger(__name__)

DateInput = Union[date, datetime, str]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Отображение невалидного значения (NaN/Inf, нераспознанная дата)
INVALID_DISPLAY: Final[str] = "—"

# Пороги сокращения величин: (порог, делитель, суффикс), по убыванию
MAGNITUDE_THRESHOLDS: Final[tuple[tuple[float, float, str], ...]] = (
    (1_000_000_000, 1e9, "B"),
    (1_000_000, 1e6, "M"),
    (1_000, 1e3, "K"),
)

PERCENT_FRACTION_DIGITS: Final[int] = 1

# CLDR-шаблон даты виджетов: числовой день, сокращённый месяц, год
DATE_PATTERN: Final[str] = "d MMM y"


# =============================================================================
# CURRENCY
# =============================================================================


def format_currency(
    value: float,
    currency: Optional[str] = None,
    locale: Optional[str] = None,
    *,
    options: Optional[FormatOptions] = None,
    formatter: Optional[LocaleFormatter] = None,
) -> str:
    """
    Денежная сумма в локализованном виде.

    Единая точка входа: конфигурация берётся из options (по умолчанию
    DEFAULT_FORMAT_OPTIONS: USD / es-MX), а явные currency/locale
    перекрывают соответствующие поля.

    Args:
        value: Сумма (может быть отрицательной)
        currency: Код валюты ISO 4217 (перекрывает options.currency)
        locale: Locale tag (перекрывает options.locale)
        options: Базовая конфигурация форматирования
        formatter: Locale-примитив (default: Babel)

    Returns:
        Строка с ровно двумя знаками после запятой, группировкой разрядов
        и символом валюты по правилам локали

    Raises:
        ValidationError: Если currency/locale невалидны (ошибка конфигурации)

    Examples:
        >>> format_currency(1234.5)
        'USD\\xa01,234.50'
    """
    resolved = options or DEFAULT_FORMAT_OPTIONS
    if currency is not None or locale is not None:
        resolved = FormatOptions(
            currency=currency if currency is not None else resolved.currency,
            locale=locale if locale is not None else resolved.locale,
        )

    if not is_valid_float(value):
        logger.warning(
            "Non-finite amount, rendering placeholder",
            value=str(value),
            currency=resolved.currency,
        )
        return INVALID_DISPLAY

    backend = formatter or DEFAULT_LOCALE_FORMATTER
    return backend.currency(value, resolved.currency, resolved.locale)


def format_dashboard_currency(
    value: float,
    *,
    formatter: Optional[LocaleFormatter] = None,
) -> str:
    """Денежная сумма для виджетов дашборда (USD / es-ES)."""
    return format_currency(value, options=DASHBOARD_FORMAT_OPTIONS, formatter=formatter)


# =============================================================================
# PERCENT
# =============================================================================


def format_percent(
    value: float,
    *,
    locale: str = DASHBOARD_LOCALE,
    formatter: Optional[LocaleFormatter] = None,
) -> str:
    """
    Процент из шкалы 0–100 (42.5 → "42,5 %" в es-ES).

    Значение делится на 100 перед передачей в locale-примитив,
    который ожидает долю 0–1. Ровно один знак после запятой.
    """
    if not is_valid_float(value):
        logger.warning("Non-finite percentage, rendering placeholder", value=str(value))
        return INVALID_DISPLAY

    backend = formatter or DEFAULT_LOCALE_FORMATTER
    return backend.percent(value / 100, locale, PERCENT_FRACTION_DIGITS)


# =============================================================================
# MAGNITUDE
# =============================================================================


def _plain_number(value: float) -> str:
    """Число без принудительных знаков: 999 → "999", 12.5 → "12.5", 5.0 → "5".

    Всегда позиционная запись: 0.00001 → "0.00001", а не "1e-05".
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        # -0.0 тоже печатается как "0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_number(value: float) -> str:
    """
    Сокращение больших величин суффиксами K/M/B.

    Пороги проверяются по абсолютному значению, первый подходящий
    выигрывает; знак сохраняется (-1500 → "-1.5K"). Ниже 1 000 число
    печатается как есть, без суффикса и без принудительных знаков.

    Args:
        value: Величина

    Returns:
        Строка вида "1.5K", "2.5M", "999"

    Examples:
        >>> format_number(1_500)
        '1.5K'
        >>> format_number(2_500_000)
        '2.5M'
        >>> format_number(999)
        '999'
    """
    if not is_valid_float(value):
        logger.warning("Non-finite magnitude, rendering placeholder", value=str(value))
        return INVALID_DISPLAY

    magnitude = abs(value)
    for threshold, divisor, suffix in MAGNITUDE_THRESHOLDS:
        if magnitude >= threshold:
            return f"{to_fixed(value / divisor, 1)}{suffix}"

    return _plain_number(value)


# =============================================================================
# DATE
# =============================================================================


def parse_date(value: DateInput) -> Optional[date]:
    """
    Приведение входа к календарной дате.

    Строки разбираются как ISO-8601 ("2024-09-05", "2024-09-05T10:30:00Z").
    У datetime берётся собственная календарная дата, без перевода
    в локальную таймзону.

    Returns:
        date или None, если строку разобрать не удалось
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        logger.debug("Unparseable date string", value=value)
        return None


def format_date(
    value: DateInput,
    *,
    locale: str = DASHBOARD_LOCALE,
    formatter: Optional[LocaleFormatter] = None,
) -> str:
    """
    Календарная дата: числовой день, сокращённый месяц, числовой год.

    Args:
        value: date / datetime или ISO-8601 строка
        locale: Locale tag (default: es-ES)
        formatter: Locale-примитив (default: Babel)

    Returns:
        Строка вида "5 sept 2024" или INVALID_DISPLAY для нераспознанной строки
    """
    parsed = parse_date(value)
    if parsed is None:
        logger.warning("Invalid date, rendering placeholder", value=str(value))
        return INVALID_DISPLAY

    backend = formatter or DEFAULT_LOCALE_FORMATTER
    return backend.date(parsed, DATE_PATTERN, locale)
