"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf санитизацию
2. Безопасное деление
3. Округление half-up и строковое представление
"""

import math
from decimal import Decimal

import pytest

from bizdash.core.math.numerical_safeguards import (
    is_valid_float,
    round_half_up,
    safe_divide,
    sanitize_float,
    to_fixed,
)

# =============================================================================
# ТЕСТЫ САНИТИЗАЦИИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_are_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1234.56)
        assert is_valid_float(1e300)

    def test_nan_and_inf_are_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestSanitizeFloat:
    """Тесты для sanitize_float"""

    def test_valid_value_unchanged(self) -> None:
        """Валидное значение не меняется"""
        assert sanitize_float(10.5) == 10.5
        assert sanitize_float(-3.0) == -3.0

    def test_nan_replaced_with_fallback(self) -> None:
        """NaN заменяется на fallback"""
        assert sanitize_float(float("nan")) == 0.0
        assert sanitize_float(float("nan"), fallback=7.0) == 7.0

    def test_inf_replaced_with_fallback(self) -> None:
        """Inf заменяется на fallback"""
        assert sanitize_float(float("inf")) == 0.0
        assert sanitize_float(float("-inf"), fallback=-1.0) == -1.0


# =============================================================================
# ТЕСТЫ БЕЗОПАСНОГО ДЕЛЕНИЯ
# =============================================================================


class TestSafeDivide:
    """Тесты для safe_divide"""

    def test_regular_division(self) -> None:
        """Обычное деление"""
        assert safe_divide(10.0, 2.0) == 5.0
        assert safe_divide(-9.0, 3.0) == -3.0

    def test_zero_denominator_returns_fallback(self) -> None:
        """Деление на ноль → fallback"""
        assert safe_divide(10.0, 0.0) == 0.0
        assert safe_divide(10.0, 0.0, fallback=-1.0) == -1.0
        assert safe_divide(10.0, -0.0) == 0.0

    def test_tiny_denominator_not_clamped(self) -> None:
        """Малый ненулевой знаменатель используется как есть"""
        assert safe_divide(1.0, 1e-15) == pytest.approx(1e15)

    def test_nan_inputs_sanitized(self) -> None:
        """NaN на входе не пропагирует"""
        assert safe_divide(float("nan"), 2.0) == 0.0
        assert safe_divide(2.0, float("nan")) == 0.0

    def test_overflow_returns_fallback(self) -> None:
        """Переполнение результата → fallback"""
        result = safe_divide(1e308, 1e-308, fallback=0.0)
        assert result == 0.0
        assert not math.isinf(result)


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundHalfUp:
    """Тесты для round_half_up"""

    def test_exact_half_rounds_away_from_zero(self) -> None:
        """Точная половина округляется от нуля"""
        assert round_half_up(1.25, 1) == Decimal("1.3")
        assert round_half_up(-1.25, 1) == Decimal("-1.3")
        assert round_half_up(2.5, 0) == Decimal("3")

    def test_binary_representation_respected(self) -> None:
        """1.15 в двоичном виде меньше половины → вниз"""
        assert round_half_up(1.15, 1) == Decimal("1.1")

    def test_result_has_exact_digits(self) -> None:
        """Результат содержит ровно digits знаков"""
        assert str(round_half_up(2.0, 2)) == "2.00"

    def test_huge_value_supported(self) -> None:
        """Очень большие значения не выходят за точность контекста"""
        result = round_half_up(1e300, 1)
        assert result == Decimal(1e300)
        assert result.as_tuple().exponent == -1

    def test_invalid_arguments_raise(self) -> None:
        """Невалидные аргументы вызывают ошибку"""
        with pytest.raises(ValueError, match="digits must be non-negative"):
            round_half_up(1.0, -1)

        with pytest.raises(ValueError, match="valid float"):
            round_half_up(float("nan"), 1)


class TestToFixed:
    """Тесты для to_fixed"""

    def test_basic(self) -> None:
        assert to_fixed(1.5, 1) == "1.5"
        assert to_fixed(2, 1) == "2.0"
        assert to_fixed(0.05, 1) == "0.1"

    def test_negative_zero_has_no_sign(self) -> None:
        """-0.04 → "0.0" (без минуса)"""
        assert to_fixed(-0.04, 1) == "0.0"
        assert to_fixed(-0.0, 2) == "0.00"

    def test_negative_value_keeps_sign(self) -> None:
        assert to_fixed(-12.345, 1) == "-12.3"
