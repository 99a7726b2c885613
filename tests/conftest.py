"""Общие fixtures: детерминированный locale-примитив."""

from datetime import date

import pytest


class FakeLocaleFormatter:
    """LocaleFormatter без CLDR данных: запоминает вызовы, форматирует предсказуемо."""

    def __init__(self):
        self.calls = []

    def currency(self, value: float, currency: str, locale: str) -> str:
        self.calls.append(("currency", value, currency, locale))
        return f"{currency} {value:.2f} [{locale}]"

    def percent(self, fraction: float, locale: str, fraction_digits: int) -> str:
        self.calls.append(("percent", fraction, locale, fraction_digits))
        return f"{fraction * 100:.{fraction_digits}f}% [{locale}]"

    def date(self, value: date, pattern: str, locale: str) -> str:
        self.calls.append(("date", value, pattern, locale))
        return f"{value.isoformat()}|{pattern}|{locale}"


@pytest.fixture
def fake_formatter():
    """Детерминированный LocaleFormatter."""
    return FakeLocaleFormatter()
