"""
Records — Сырые записи продаж, закупок и склада

Immutable Pydantic модели строк, которые дашборд получает из хранилища:
- SaleRecord (таблица ventas: fecha, total, productos)
- PurchaseRecord (таблица purchases: fecha_compra, total)
- InventoryItem (ингредиенты склада: cantidad, stock_minimo)

Дата может прийти как "YYYY-MM-DD" или как timestamp; в модели хранится
только календарная дата.
"""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


def _calendar_date(value: Any) -> Any:
    """Срезает время у datetime и timestamp-строк."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        return value[:10]
    return value


class SaleRecord(BaseModel):
    """Продажа (ventas)."""

    fecha: date = Field(..., description="Дата продажи")
    total: float = Field(..., description="Сумма продажи")
    productos: str = Field(
        "", description="Товары продажи через запятую или перевод строки"
    )

    model_config = {"frozen": True}

    @field_validator("fecha", mode="before")
    @classmethod
    def normalize_fecha(cls, value: Any) -> Any:
        return _calendar_date(value)

    @field_validator("productos", mode="before")
    @classmethod
    def normalize_productos(cls, value: Any) -> Any:
        return "" if value is None else value


class PurchaseRecord(BaseModel):
    """Закупка (purchases)."""

    fecha_compra: date = Field(..., description="Дата закупки")
    total: float = Field(..., description="Сумма закупки")

    model_config = {"frozen": True}

    @field_validator("fecha_compra", mode="before")
    @classmethod
    def normalize_fecha_compra(cls, value: Any) -> Any:
        return _calendar_date(value)


class InventoryItem(BaseModel):
    """Позиция склада (ингредиент)."""

    nombre: str = Field("", description="Название ингредиента")
    cantidad: float = Field(..., description="Текущий остаток")
    stock_minimo: Optional[float] = Field(
        None, description="Минимальный остаток (nullable, трактуется как 0)"
    )

    model_config = {"frozen": True}
