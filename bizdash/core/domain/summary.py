"""
Summary — Модели сводки периода и виджетов дашборда

Immutable Pydantic модели:
- PeriodSummary: метрики текущего и предыдущего месяца
- SummaryCard: отрендеренная карточка (значение, изменение, подпись)
- FinancialSeries: ряды выручки/расходов/прибыли для графика
- ProductPerformance: строка рейтинга товаров
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Timeframe(str, Enum):
    """Горизонт графика финансов."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class CardFormat(str, Enum):
    """Как отображается значение карточки."""

    CURRENCY = "currency"
    PERCENT = "percent"
    COUNT = "count"


# =============================================================================
# PERIOD SUMMARY
# =============================================================================


class PeriodSummary(BaseModel):
    """
    Сводка текущего периода относительно предыдущего.

    Проценты (profit_margin) — в шкале 0–100.
    """

    total_revenue: float = Field(0.0, description="Выручка текущего периода")
    previous_revenue: float = Field(0.0, description="Выручка предыдущего периода")
    total_expenses: float = Field(0.0, description="Расходы текущего периода")
    previous_expenses: float = Field(0.0, description="Расходы предыдущего периода")
    profit_margin: float = Field(0.0, description="Маржа прибыли, %")
    previous_profit_margin: float = Field(0.0, description="Маржа прибыли ранее, %")
    average_ticket: float = Field(0.0, description="Средний чек")
    previous_average_ticket: float = Field(0.0, description="Средний чек ранее")
    total_sales: int = Field(0, ge=0, description="Количество продаж")
    previous_sales: int = Field(0, ge=0, description="Количество продаж ранее")
    low_stock_items: int = Field(0, ge=0, description="Позиции ниже минимума")

    model_config = {"frozen": True}


# =============================================================================
# SUMMARY CARD
# =============================================================================


class SummaryCard(BaseModel):
    """
    Карточка сводки дашборда.

    Для карточек без сравнения (comparable=False) change, change_label
    и favorable равны None.
    """

    key: str = Field(..., min_length=1, description="Идентификатор метрики")
    title: str = Field(..., min_length=1, description="Заголовок карточки")
    value_format: CardFormat = Field(..., description="Формат значения")
    value: float = Field(..., description="Значение текущего периода")
    previous_value: float = Field(0.0, description="Значение предыдущего периода")
    display_value: str = Field(..., description="Отформатированное значение")
    comparable: bool = Field(True, description="Показывается ли сравнение")
    change: Optional[float] = Field(None, description="Изменение, %")
    change_label: Optional[str] = Field(None, description="Подпись изменения")
    favorable: Optional[bool] = Field(None, description="Благоприятное изменение")
    note: Optional[str] = Field(None, description="Подпись карточки без сравнения")

    model_config = {"frozen": True}


# =============================================================================
# FINANCIAL SERIES
# =============================================================================


class FinancialSeries(BaseModel):
    """
    Ряды графика финансов.

    Все списки одной длины; keys — ключи бакетов ("YYYY-MM" или "YYYY-MM-DD"),
    labels — их отображаемые подписи.
    """

    timeframe: Timeframe
    keys: list[str]
    labels: list[str]
    revenue: list[float]
    expenses: list[float]
    profit: list[float]

    model_config = {"frozen": True}


# =============================================================================
# PRODUCT PERFORMANCE
# =============================================================================


class ProductPerformance(BaseModel):
    """
    Строка рейтинга самых продаваемых товаров.

    units — сколько раз товар встречается в продажах периода;
    share и growth — в шкале 0–100.
    """

    name: str = Field(..., min_length=1, description="Название товара")
    units: int = Field(..., ge=0, description="Упоминаний в продажах периода")
    revenue: float = Field(0.0, description="Оценка выручки (доля суммы продажи)")
    share: float = Field(..., description="Доля от всех позиций периода, %")
    growth: float = Field(..., description="Изменение units к предыдущему периоду, %")
    growth_label: str = Field(..., description="Подпись изменения ('+50.0%')")
    share_label: str = Field(..., description="Отформатированная доля")
    favorable: bool = Field(..., description="Рост продаж товара")

    model_config = {"frozen": True}
