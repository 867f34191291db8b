"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. API handlers import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from buildops.core.services import ProcurementWorkflowService, StockAdjustmentService

if TYPE_CHECKING:
    from buildops.core.interfaces import (
        IAccountStore,
        IActivityLog,
        IInventoryStore,
        ILedgerStore,
        IPurchaseOrderStore,
        IUnitOfWork,
    )


# Singleton service instances
_procurement_workflow_service: ProcurementWorkflowService | None = None
_stock_adjustment_service: StockAdjustmentService | None = None


async def get_procurement_workflow_service(
    unit_of_work: "IUnitOfWork | None" = None,
    order_store: "IPurchaseOrderStore | None" = None,
    inventory_store: "IInventoryStore | None" = None,
    ledger_store: "ILedgerStore | None" = None,
    account_store: "IAccountStore | None" = None,
    activity_log: "IActivityLog | None" = None,
) -> ProcurementWorkflowService:
    """
    Get or create ProcurementWorkflowService instance.

    Any collaborator not provided is taken from the SQLite infrastructure.
    Only the fully default-wired service is cached.

    Returns:
        Configured ProcurementWorkflowService
    """
    global _procurement_workflow_service

    overridden = any(
        dep is not None
        for dep in (
            unit_of_work,
            order_store,
            inventory_store,
            ledger_store,
            account_store,
            activity_log,
        )
    )
    if _procurement_workflow_service is not None and not overridden:
        return _procurement_workflow_service

    # Lazy import infrastructure to avoid circular imports
    from buildops.infrastructure.storage.sqlite import (
        get_account_store,
        get_activity_log,
        get_inventory_store,
        get_ledger_store,
        get_purchase_order_store,
        get_unit_of_work,
    )

    service = ProcurementWorkflowService(
        unit_of_work=unit_of_work or await get_unit_of_work(),
        order_store=order_store or await get_purchase_order_store(),
        inventory_store=inventory_store or await get_inventory_store(),
        ledger_store=ledger_store or await get_ledger_store(),
        account_store=account_store or await get_account_store(),
        activity_log=activity_log or await get_activity_log(),
    )

    if not overridden:
        _procurement_workflow_service = service

    return service


async def get_stock_adjustment_service(
    unit_of_work: "IUnitOfWork | None" = None,
    inventory_store: "IInventoryStore | None" = None,
    activity_log: "IActivityLog | None" = None,
) -> StockAdjustmentService:
    """Get or create StockAdjustmentService instance."""
    global _stock_adjustment_service

    overridden = any(dep is not None for dep in (unit_of_work, inventory_store, activity_log))
    if _stock_adjustment_service is not None and not overridden:
        return _stock_adjustment_service

    from buildops.infrastructure.storage.sqlite import (
        get_activity_log,
        get_inventory_store,
        get_unit_of_work,
    )

    service = StockAdjustmentService(
        unit_of_work=unit_of_work or await get_unit_of_work(),
        inventory_store=inventory_store or await get_inventory_store(),
        activity_log=activity_log or await get_activity_log(),
    )

    if not overridden:
        _stock_adjustment_service = service

    return service


def reset_services() -> None:
    """Reset all singleton services (for testing)."""
    global _procurement_workflow_service, _stock_adjustment_service
    _procurement_workflow_service = None
    _stock_adjustment_service = None
