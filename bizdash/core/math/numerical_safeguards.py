"""
Numerical Safeguards — безопасные математические примитивы

Модуль обеспечивает численную устойчивость метрик дашборда:
- Безопасное деление с защитой от деления на ноль
- NaN/Inf санитизация для предотвращения распространения невалидных значений
- Округление half-up для отображаемых значений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
) -> float:
    """
    Безопасное деление с защитой от деления на ноль и NaN/Inf.

    ВАЖНО: epsilon-защита знаменателя здесь не применяется. Метрики
    дашборда должны совпадать с формулой один в один, поэтому
    подменяется только точный ноль.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при делении на ноль (default: 0.0)

    Returns:
        Результат деления или fallback при делении на ноль

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
    """
    num_clean = sanitize_float(numerator, fallback=0.0)
    denom_clean = sanitize_float(denominator, fallback=0.0)

    if denom_clean == 0.0:
        return fallback

    try:
        result = num_clean / denom_clean
    except (ZeroDivisionError, OverflowError):
        return fallback

    return sanitize_float(result, fallback=fallback)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float, digits: int) -> Decimal:
    """
    Округление до `digits` знаков после запятой, половина — от нуля.

    Работает по точному двоичному значению float (Decimal(value)), поэтому
    1.25 → 1.3 (точная половина), а 1.15 → 1.1 (в двоичном виде 1.1499...).

    Args:
        value: Значение (должно быть finite)
        digits: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение как Decimal с ровно `digits` знаками

    Raises:
        ValueError: Если digits < 0 или value не finite

    Examples:
        >>> str(round_half_up(1.25, 1))
        '1.3'
        >>> str(round_half_up(-2.5, 0))
        '-3'
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")

    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    # Точности хватает на любой finite float (до ~1.8e308)
    with localcontext() as ctx:
        ctx.prec = 330 + digits
        quantum = Decimal(1).scaleb(-digits)
        return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def to_fixed(value: float, digits: int) -> str:
    """
    Строковое представление с фиксированным числом знаков (half-up).

    Отрицательный ноль после округления печатается без знака.

    Examples:
        >>> to_fixed(1.5, 1)
        '1.5'
        >>> to_fixed(-0.04, 1)
        '0.0'
    """
    rounded = round_half_up(value, digits)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:f}"
