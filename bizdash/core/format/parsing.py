"""
Currency Parser — обратная операция к format_currency

Извлекает число из произвольной строки с денежной суммой: удаляются все
символы, кроме ASCII-цифр, точки и минуса. Неудачный разбор даёт 0.0,
исключение не бросается.

НЕ является строгой обратной к format_currency: в локалях, где разделитель
разрядов — точка (es-ES: "1.234.567,89 US$"), после фильтрации остаётся
"1.234.56789" и разбор падает в 0.0; запятая-десятичный разделитель
просто выбрасывается, смещая порядок величины.
"""

import re
from typing import Final

import structlog

from bizdash.core.math.numerical_safeguards import sanitize_float

logger = structlog.get_logger(__name__)

# Всё, кроме ASCII-цифр, "." и "-"
_STRIP_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^0-9.\-]")


def strip_currency_text(text: str) -> str:
    """Оставляет только ASCII-цифры, "." и "-"."""
    return _STRIP_PATTERN.sub("", text)


def parse_currency(text: str) -> float:
    """
    Число из строки с денежной суммой.

    Args:
        text: Строка вида "$1,234.56", "-$12.00", "USD 1,000"

    Returns:
        Распознанное число или 0.0, если остаток пустой или некорректный
        ("", "1.2.3", "1-2"). Отрицательный ноль нормализуется в 0.0.

    Examples:
        >>> parse_currency("$1,234.56")
        1234.56
        >>> parse_currency("abc")
        0.0
    """
    cleaned = strip_currency_text(text)
    if not cleaned:
        return 0.0

    try:
        value = float(cleaned)
    except ValueError:
        logger.debug("Unparseable currency text, falling back to zero", text=text)
        return 0.0

    # -0.0 тоже ложно; переполнение ("9" * 400) даёт inf
    return sanitize_float(value) or 0.0
