"""
Metrics — производные метрики виджетов дашборда

Модуль вычисляет сравнительные метрики периода:
- percent change (текущий период vs предыдущий)
- маржа прибыли и средний чек
- количество позиций склада ниже минимального остатка
- направление изменения (благоприятное / неблагоприятное)

Все значения в процентах — в шкале 0–100 (42.5 означает 42.5%),
а не в долях 0–1. Их напрямую потребляет format_percent.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевая база (previous == 0) никогда не приводит к делению на ноль
2. NaN/Inf на входе не пропагируют в результат
3. Функции чистые: вход не мутируется
"""

from typing import Final, Iterable, Optional, Protocol

from bizdash.core.math.numerical_safeguards import (
    safe_divide,
    sanitize_float,
    to_fixed,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Изменение "рост с нуля" для нулевой базы
GROWTH_FROM_ZERO_PCT: Final[float] = 100.0

# Подпись сравнения с предыдущим периодом по умолчанию
DEFAULT_CHANGE_SUFFIX: Final[str] = "vs mes anterior"


class StockLevel(Protocol):
    """Любая позиция склада с текущим и минимальным остатком."""

    cantidad: float
    stock_minimo: Optional[float]


# =============================================================================
# PERCENT CHANGE
# =============================================================================


def calculate_percent_change(current: float, previous: float) -> float:
    """
    Относительное изменение между двумя значениями в процентах.

    Формула: ((current - previous) / previous) * 100

    Нулевая база (previous == 0):
        - current > 0 → 100.0 ("рост с нуля")
        - иначе → 0.0 (остались на нуле или ушли в минус с нуля)

    NaN/Inf на входе заменяются нулём до вычисления.

    Args:
        current: Значение текущего периода
        previous: Значение предыдущего периода

    Returns:
        Изменение в шкале 0–100 (может быть отрицательным)

    Examples:
        >>> calculate_percent_change(150, 100)
        50.0
        >>> calculate_percent_change(50, 100)
        -50.0
        >>> calculate_percent_change(10, 0)
        100.0
        >>> calculate_percent_change(0, 0)
        0.0
    """
    current_clean = sanitize_float(float(current))
    previous_clean = sanitize_float(float(previous))

    if previous_clean == 0.0:
        return GROWTH_FROM_ZERO_PCT if current_clean > 0 else 0.0

    ratio = safe_divide(current_clean - previous_clean, previous_clean)
    return sanitize_float(ratio * 100.0)


# =============================================================================
# МЕТРИКИ ПЕРИОДА
# =============================================================================


def calculate_profit_margin(revenue: float, expenses: float) -> float:
    """
    Маржа прибыли в процентах: (revenue - expenses) / revenue * 100.

    Без выручки (revenue <= 0) маржа равна 0.0.
    """
    revenue_clean = sanitize_float(float(revenue))
    expenses_clean = sanitize_float(float(expenses))

    if revenue_clean <= 0:
        return 0.0

    return safe_divide(revenue_clean - expenses_clean, revenue_clean) * 100.0


def calculate_average_ticket(revenue: float, sales_count: int) -> float:
    """Средний чек: выручка на одну продажу (0.0 если продаж не было)."""
    if sales_count <= 0:
        return 0.0
    return safe_divide(float(revenue), float(sales_count))


def count_low_stock(items: Iterable[StockLevel]) -> int:
    """
    Количество позиций, у которых остаток не выше минимального.

    Отсутствующий stock_minimo считается нулём, поэтому позиция с нулевым
    остатком всегда попадает в список.
    """
    return sum(1 for item in items if item.cantidad <= (item.stock_minimo or 0))


# =============================================================================
# НАПРАВЛЕНИЕ ИЗМЕНЕНИЯ
# =============================================================================


def is_favorable_change(change: float, lower_is_better: bool = False) -> bool:
    """
    Благоприятно ли изменение метрики.

    Для расходов и дефицита склада (lower_is_better=True) хорошо падение,
    для остальных метрик хорош строгий рост. Нулевое изменение
    не благоприятно ни в одном случае.

    Args:
        change: Изменение в шкале 0–100
        lower_is_better: True для метрик, где рост — плохой сигнал

    Returns:
        True если изменение благоприятное
    """
    if lower_is_better:
        return change < 0
    return change > 0


def format_change_label(change: float, suffix: str = DEFAULT_CHANGE_SUFFIX) -> str:
    """
    Подпись изменения для карточки: "+50.0% vs mes anterior".

    Знак "+" ставится только для строго положительных значений,
    отрицательные печатаются со своим минусом. Один знак после запятой.

    Examples:
        >>> format_change_label(50.0)
        '+50.0% vs mes anterior'
        >>> format_change_label(-12.345, suffix="vs semana anterior")
        '-12.3% vs semana anterior'
    """
    change_clean = sanitize_float(float(change))
    sign = "+" if change_clean > 0 else ""
    label = f"{sign}{to_fixed(change_clean, 1)}%"
    if suffix:
        label = f"{label} {suffix}"
    return label
