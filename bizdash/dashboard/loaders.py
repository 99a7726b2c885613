"""Загрузка сырых строк хранилища в модели записей.

Каждая строка проверяется контрактом своей таблицы и превращается
в immutable Pydantic модель. Лишние колонки (id, user_id, hora, ...)
игнорируются; значения date/datetime допустимы наравне с ISO-строками.
"""

from typing import Any, Iterable, Mapping

import structlog

from bizdash.core.contracts import INVENTORY_CONTRACT, PURCHASE_CONTRACT, SALE_CONTRACT
from bizdash.core.domain.records import InventoryItem, PurchaseRecord, SaleRecord

logger = structlog.get_logger(__name__)

Row = Mapping[str, Any]


def load_sales(rows: Iterable[Row]) -> list[SaleRecord]:
    """Строки ventas → SaleRecord.

    Raises:
        ContractViolation: Если строка не соответствует контракту
    """
    records = SALE_CONTRACT.parse_all(rows)
    logger.debug("Loaded sales", count=len(records))
    return records


def load_purchases(rows: Iterable[Row]) -> list[PurchaseRecord]:
    records = PURCHASE_CONTRACT.parse_all(rows)
    logger.debug("Loaded purchases", count=len(records))
    return records


def load_inventory(rows: Iterable[Row]) -> list[InventoryItem]:
    items = INVENTORY_CONTRACT.parse_all(rows)
    logger.debug("Loaded inventory", count=len(items))
    return items
