"""
Tests for Domain Models

Покрывает:
- FormatOptions: значения по умолчанию, валидацию кода валюты и locale tag
- parse_locale_tag: оба разделителя, ошибки
- Records: нормализацию дат, immutability
- Summary модели
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from bizdash.core.domain import (
    DASHBOARD_FORMAT_OPTIONS,
    DEFAULT_FORMAT_OPTIONS,
    CardFormat,
    FinancialSeries,
    FormatOptions,
    InventoryItem,
    PeriodSummary,
    PurchaseRecord,
    SaleRecord,
    SummaryCard,
    Timeframe,
    parse_locale_tag,
)


# =============================================================================
# FORMAT OPTIONS
# =============================================================================


class TestFormatOptions:
    """Тесты для FormatOptions"""

    def test_defaults(self) -> None:
        options = FormatOptions()
        assert options.currency == "USD"
        assert options.locale == "es-MX"
        assert options == DEFAULT_FORMAT_OPTIONS

    def test_dashboard_options(self) -> None:
        assert DASHBOARD_FORMAT_OPTIONS.currency == "USD"
        assert DASHBOARD_FORMAT_OPTIONS.locale == "es-ES"

    def test_underscore_locale_accepted(self) -> None:
        assert FormatOptions(locale="es_ES").locale == "es_ES"

    @pytest.mark.parametrize("currency", ["usd", "US", "EURO", "U$D", ""])
    def test_invalid_currency_rejected(self, currency) -> None:
        with pytest.raises(ValidationError):
            FormatOptions(currency=currency)

    @pytest.mark.parametrize("locale", ["zz-ZZ", "not a locale", ""])
    def test_invalid_locale_rejected(self, locale) -> None:
        with pytest.raises(ValidationError):
            FormatOptions(locale=locale)

    def test_frozen(self) -> None:
        options = FormatOptions()
        with pytest.raises(ValidationError):
            options.currency = "EUR"


class TestParseLocaleTag:
    """Тесты для parse_locale_tag"""

    def test_hyphen_and_underscore(self) -> None:
        hyphen = parse_locale_tag("es-MX")
        underscore = parse_locale_tag("es_MX")
        assert hyphen.language == underscore.language == "es"
        assert hyphen.territory == underscore.territory == "MX"

    def test_language_only(self) -> None:
        assert parse_locale_tag("es").territory is None

    def test_unknown_locale_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale tag"):
            parse_locale_tag("zz-ZZ")

    def test_empty_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            parse_locale_tag("   ")


# =============================================================================
# RECORDS
# =============================================================================


class TestRecords:
    """Тесты для SaleRecord / PurchaseRecord / InventoryItem"""

    def test_sale_from_iso_date(self) -> None:
        sale = SaleRecord(fecha="2024-09-05", total=120.5)
        assert sale.fecha == date(2024, 9, 5)
        assert sale.total == 120.5

    def test_timestamp_truncated_to_calendar_date(self) -> None:
        purchase = PurchaseRecord(fecha_compra="2024-09-05T18:45:00+00:00", total=80)
        assert purchase.fecha_compra == date(2024, 9, 5)

    def test_datetime_truncated_to_calendar_date(self) -> None:
        sale = SaleRecord(fecha=datetime(2024, 9, 5, 23, 59), total=1)
        assert sale.fecha == date(2024, 9, 5)

    def test_invalid_date_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SaleRecord(fecha="yesterday", total=1)

    def test_missing_total_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SaleRecord(fecha="2024-09-05")

    def test_inventory_defaults(self) -> None:
        item = InventoryItem(cantidad=3)
        assert item.nombre == ""
        assert item.stock_minimo is None

    def test_records_are_frozen(self) -> None:
        sale = SaleRecord(fecha="2024-09-05", total=1)
        with pytest.raises(ValidationError):
            sale.total = 2


# =============================================================================
# SUMMARY MODELS
# =============================================================================


class TestSummaryModels:
    """Тесты для PeriodSummary / SummaryCard / FinancialSeries"""

    def test_period_summary_defaults_to_zero(self) -> None:
        summary = PeriodSummary()
        assert summary.total_revenue == 0.0
        assert summary.total_sales == 0
        assert summary.low_stock_items == 0

    def test_period_summary_rejects_negative_counts(self) -> None:
        with pytest.raises(ValidationError):
            PeriodSummary(total_sales=-1)

    def test_summary_card_without_comparison(self) -> None:
        card = SummaryCard(
            key="low_stock",
            title="Inventario Bajo",
            value_format=CardFormat.COUNT,
            value=3,
            display_value="3",
            comparable=False,
        )
        assert card.change is None
        assert card.favorable is None

    def test_financial_series_timeframe_from_string(self) -> None:
        series = FinancialSeries(
            timeframe="week",
            keys=[],
            labels=[],
            revenue=[],
            expenses=[],
            profit=[],
        )
        assert series.timeframe is Timeframe.WEEK
