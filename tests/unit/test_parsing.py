"""
Тесты для Currency Parser

Проверяет:
1. Фильтрацию символов и разбор числа
2. Fallback 0.0 для пустого/некорректного остатка
3. Известную необратимость parse_currency(format_currency(x))
"""

import pytest

from bizdash.core.format import format_currency, parse_currency, strip_currency_text


class TestStripCurrencyText:
    """Тесты для strip_currency_text"""

    def test_keeps_digits_dot_and_minus(self) -> None:
        assert strip_currency_text("-$1,234.56 USD") == "-1234.56"

    def test_non_ascii_digits_removed(self) -> None:
        """Только ASCII-цифры"""
        assert strip_currency_text("١٢٣") == ""


class TestParseCurrency:
    """Тесты для parse_currency"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("$1,234.56", 1234.56),
            ("USD 1,000", 1000.0),
            ("-$12.00", -12.0),
            ("  42  ", 42.0),
            (".5", 0.5),
            ("7.", 7.0),
        ],
    )
    def test_parses_amount(self, text, expected) -> None:
        assert parse_currency(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "abc", "$", "-", ".", "1.2.3", "1-2", "--5"])
    def test_malformed_falls_back_to_zero(self, text) -> None:
        assert parse_currency(text) == 0.0

    def test_negative_zero_normalized(self) -> None:
        result = parse_currency("-0")
        assert result == 0.0
        assert str(result) == "0.0"

    def test_overflow_falls_back_to_zero(self) -> None:
        assert parse_currency("9" * 400) == 0.0

    def test_comma_decimal_separator_shifts_magnitude(self) -> None:
        """Запятая выбрасывается как разделитель разрядов"""
        assert parse_currency("1234,50 €") == 123450.0


class TestRoundTripIsNotGuaranteed:
    """parse_currency не является строгой обратной к format_currency"""

    def test_es_mx_round_trips(self) -> None:
        """es-MX: запятые разрядов удаляются, точка остаётся десятичной"""
        assert parse_currency(format_currency(1234.5)) == pytest.approx(1234.5)

    def test_es_es_does_not_round_trip(self) -> None:
        """es-ES: точка — разделитель разрядов, результат искажается"""
        value = 1234567.89
        formatted = format_currency(value, locale="es-ES")
        assert parse_currency(formatted) != pytest.approx(value)
