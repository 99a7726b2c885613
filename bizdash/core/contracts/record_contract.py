"""
Record Contracts — JSON Schema контракты строк хранилища

Строка из хранилища (dict с лишними колонками) проходит два шага:
1. Приведение к JSON-представлению: date/datetime → ISO-строка
2. Проверка схемой (Draft 2020-12) и построение immutable модели

Схема описывает форму строки в хранилище, модель отвечает за
нормализацию (timestamp → календарная дата, null → значение по умолчанию).
Все нарушения строки собираются в одно исключение ContractViolation.

Схемы лежат в schema/ рядом с модулем (package data).
"""

import json
from datetime import date
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Generic, Iterable, Mapping, Optional, TypeVar

from jsonschema import Draft202012Validator, SchemaError
from pydantic import BaseModel

from bizdash.core.domain.records import InventoryItem, PurchaseRecord, SaleRecord

ModelT = TypeVar("ModelT", bound=BaseModel)


# =============================================================================
# SCHEMAS
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(name: str, schema_dir: Optional[Path] = None) -> dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema.

    Args:
        name: Имя схемы без расширения ('sale_record')
        schema_dir: Каталог схем (default: schema/ из package data)

    Returns:
        Схема как dict (кэшируется)

    Raises:
        FileNotFoundError: Если файла схемы нет
        ValueError: Если файл не является валидной JSON Schema
    """
    base = schema_dir if schema_dir is not None else resources.files(__package__) / "schema"
    path = base / f"{name}.json"
    if not path.is_file():
        raise FileNotFoundError(f"Schema not found: {path}")

    schema = json.loads(path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {name}.json: {e.message}") from e
    return schema


# =============================================================================
# CONTRACT
# =============================================================================


class ContractViolation(ValueError):
    """Строка не соответствует контракту; errors — все нарушения по порядку."""

    def __init__(self, contract: str, errors: list[str]):
        self.contract = contract
        self.errors = errors
        super().__init__(f"{contract}: {'; '.join(errors)}")


def to_json_row(row: Mapping[str, Any]) -> dict[str, Any]:
    """Копия строки, где date/datetime заменены ISO-строками."""
    return {
        key: value.isoformat() if isinstance(value, date) else value
        for key, value in row.items()
    }


class RecordContract(Generic[ModelT]):
    """
    Контракт строки хранилища: схема + модель, которую из строки строят.

    Examples:
        >>> SALE_CONTRACT.parse({"fecha": "2024-09-05", "total": 10}).total
        10.0
    """

    def __init__(self, schema_name: str, model: type[ModelT], schema_dir: Optional[Path] = None):
        self.schema_name = schema_name
        self.model = model
        self._validator = Draft202012Validator(load_schema(schema_name, schema_dir))

    def errors(self, row: Mapping[str, Any]) -> list[str]:
        """Все нарушения строки в виде "путь: сообщение" (пустой список — строка валидна)."""
        found = sorted(
            self._validator.iter_errors(to_json_row(row)),
            key=lambda error: list(map(str, error.absolute_path)),
        )
        return [
            f"{'/'.join(map(str, error.absolute_path)) or '<row>'}: {error.message}"
            for error in found
        ]

    def is_valid(self, row: Mapping[str, Any]) -> bool:
        return self._validator.is_valid(to_json_row(row))

    def check(self, row: Mapping[str, Any]) -> None:
        """
        Raises:
            ContractViolation: Если строка не соответствует схеме
        """
        errors = self.errors(row)
        if errors:
            raise ContractViolation(self.schema_name, errors)

    def parse(self, row: Mapping[str, Any]) -> ModelT:
        """Проверка строки и построение модели; лишние колонки игнорируются."""
        payload = to_json_row(row)
        self.check(payload)
        return self.model.model_validate(payload)

    def parse_all(self, rows: Iterable[Mapping[str, Any]]) -> list[ModelT]:
        return [self.parse(row) for row in rows]


SALE_CONTRACT: "RecordContract[SaleRecord]" = RecordContract("sale_record", SaleRecord)

PURCHASE_CONTRACT: "RecordContract[PurchaseRecord]" = RecordContract("purchase_record", PurchaseRecord)

INVENTORY_CONTRACT: "RecordContract[InventoryItem]" = RecordContract("inventory_item", InventoryItem)
