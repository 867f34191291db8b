"""Entity to response DTO conversion."""

from buildops.application.dto.responses import (
    AccountResponse,
    ActivityEntryResponse,
    InventoryItemResponse,
    PurchaseOrderResponse,
    TransactionResponse,
    WorkflowResultResponse,
)
from buildops.core.entities import (
    Account,
    ActivityEntry,
    FinancialTransaction,
    InventoryItem,
    PurchaseOrder,
)
from buildops.core.services.results import WorkflowResult


def order_to_response(order: PurchaseOrder) -> PurchaseOrderResponse:
    return PurchaseOrderResponse(
        id=order.id,
        item_id=order.item_id,
        item_name=order.item_name,
        quantity=order.quantity,
        unit_cost=order.unit_cost,
        total_cost=order.total_cost,
        supplier_id=order.supplier_id,
        project_id=order.project_id,
        status=order.status.value,
        version=order.version,
        requested_at=order.requested_at,
        updated_at=order.updated_at,
    )


def item_to_response(item: InventoryItem) -> InventoryItemResponse:
    return InventoryItemResponse(
        id=item.id,
        name=item.name,
        category=item.category,
        quantity=item.quantity,
        warehouse=item.warehouse,
        status=item.status.value,
        version=item.version,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


def transaction_to_response(transaction: FinancialTransaction) -> TransactionResponse:
    return TransactionResponse(
        id=transaction.id,
        description=transaction.description,
        amount=transaction.amount,
        type=transaction.type.value,
        date=transaction.date,
        purchase_order_id=transaction.purchase_order_id,
        project_id=transaction.project_id,
        supplier_id=transaction.supplier_id,
        account_id=transaction.account_id,
        created_at=transaction.created_at,
    )


def account_to_response(account: Account) -> AccountResponse:
    return AccountResponse(
        id=account.id,
        name=account.name,
        bank_name=account.bank_name,
        account_number=account.account_number,
        initial_balance=account.initial_balance,
        is_default=account.is_default,
        created_at=account.created_at,
    )


def activity_to_response(entry: ActivityEntry) -> ActivityEntryResponse:
    return ActivityEntryResponse(
        id=entry.id,
        message=entry.message,
        type=entry.type.value,
        link=entry.link,
        timestamp=entry.timestamp,
    )


def workflow_result_to_response(result: WorkflowResult) -> WorkflowResultResponse:
    """Convert a successful workflow result. Failures go through the error mapping."""
    return WorkflowResultResponse(
        success=result.success,
        message=result.message,
        status=result.status,
        order=order_to_response(result.order) if result.order else None,
        item=item_to_response(result.item) if result.item else None,
        transaction=(
            transaction_to_response(result.transaction) if result.transaction else None
        ),
    )
