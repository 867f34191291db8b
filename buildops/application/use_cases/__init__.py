"""Application use cases."""

from buildops.application.use_cases.create_purchase_order import CreatePurchaseOrderUseCase
from buildops.application.use_cases.delete_purchase_order import DeletePurchaseOrderUseCase
from buildops.application.use_cases.manage_inventory_item import (
    AddInventoryItemUseCase,
    DeleteInventoryItemUseCase,
    UpdateInventoryItemUseCase,
)
from buildops.application.use_cases.manage_ledger import (
    DeleteAccountUseCase,
    RecordTransactionUseCase,
    UpdateAccountUseCase,
)
from buildops.application.use_cases.update_purchase_order import UpdatePurchaseOrderUseCase

__all__ = [
    "CreatePurchaseOrderUseCase",
    "UpdatePurchaseOrderUseCase",
    "DeletePurchaseOrderUseCase",
    "AddInventoryItemUseCase",
    "UpdateInventoryItemUseCase",
    "DeleteInventoryItemUseCase",
    "RecordTransactionUseCase",
    "DeleteAccountUseCase",
    "UpdateAccountUseCase",
]
