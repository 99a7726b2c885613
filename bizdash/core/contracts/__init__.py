"""
Contract Validation Module

JSON Schema контракты строк хранилища, из которых строятся записи дашборда.
"""

from .record_contract import (
    INVENTORY_CONTRACT,
    PURCHASE_CONTRACT,
    SALE_CONTRACT,
    ContractViolation,
    RecordContract,
    load_schema,
    to_json_row,
)

__all__ = [
    # Contracts
    "SALE_CONTRACT",
    "PURCHASE_CONTRACT",
    "INVENTORY_CONTRACT",
    "RecordContract",
    # Errors
    "ContractViolation",
    # Helpers
    "load_schema",
    "to_json_row",
]
