"""
Dependency injection container for FastAPI.

Provides service, use case and store instances to route handlers.
"""

from functools import lru_cache

from buildops.application.services import (
    get_procurement_workflow_service,
    get_stock_adjustment_service,
)
from buildops.application.use_cases import (
    AddInventoryItemUseCase,
    CreatePurchaseOrderUseCase,
    DeleteAccountUseCase,
    DeleteInventoryItemUseCase,
    DeletePurchaseOrderUseCase,
    RecordTransactionUseCase,
    UpdateAccountUseCase,
    UpdateInventoryItemUseCase,
    UpdatePurchaseOrderUseCase,
)
from buildops.config import Settings, get_settings
from buildops.core.interfaces import (
    IAccountStore,
    IActivityLog,
    IInventoryStore,
    ILedgerStore,
    IPurchaseOrderStore,
)
from buildops.core.services import ProcurementWorkflowService, StockAdjustmentService
from buildops.infrastructure.storage.sqlite import (
    get_account_store,
    get_activity_log,
    get_inventory_store,
    get_ledger_store,
    get_purchase_order_store,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Service dependencies
async def get_workflow() -> ProcurementWorkflowService:
    """Get procurement workflow service."""
    return await get_procurement_workflow_service()


async def get_stock_adjustment() -> StockAdjustmentService:
    """Get stock adjustment service."""
    return await get_stock_adjustment_service()


# Use case dependencies
def get_create_po_use_case() -> CreatePurchaseOrderUseCase:
    return CreatePurchaseOrderUseCase()


def get_update_po_use_case() -> UpdatePurchaseOrderUseCase:
    return UpdatePurchaseOrderUseCase()


def get_delete_po_use_case() -> DeletePurchaseOrderUseCase:
    return DeletePurchaseOrderUseCase()


def get_add_item_use_case() -> AddInventoryItemUseCase:
    return AddInventoryItemUseCase()


def get_update_item_use_case() -> UpdateInventoryItemUseCase:
    return UpdateInventoryItemUseCase()


def get_delete_item_use_case() -> DeleteInventoryItemUseCase:
    return DeleteInventoryItemUseCase()


def get_record_transaction_use_case() -> RecordTransactionUseCase:
    return RecordTransactionUseCase()


def get_update_account_use_case() -> UpdateAccountUseCase:
    return UpdateAccountUseCase()


def get_delete_account_use_case() -> DeleteAccountUseCase:
    return DeleteAccountUseCase()


# Store dependencies
async def get_order_store() -> IPurchaseOrderStore:
    """Get purchase order store."""
    return await get_purchase_order_store()


async def get_item_store() -> IInventoryStore:
    """Get inventory store."""
    return await get_inventory_store()


async def get_ledger() -> ILedgerStore:
    """Get ledger store."""
    return await get_ledger_store()


async def get_accounts() -> IAccountStore:
    """Get account store."""
    return await get_account_store()


async def get_activity() -> IActivityLog:
    """Get activity log."""
    return await get_activity_log()
