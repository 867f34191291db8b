"""Data Transfer Objects for API contracts."""

from buildops.application.dto.mappers import (
    account_to_response,
    activity_to_response,
    item_to_response,
    order_to_response,
    transaction_to_response,
    workflow_result_to_response,
)
from buildops.application.dto.requests import (
    AdjustStockRequest,
    CreateAccountRequest,
    CreateInventoryItemRequest,
    CreatePurchaseOrderRequest,
    CreateTransactionRequest,
    TransitionStatusRequest,
    UpdateAccountRequest,
    UpdateInventoryItemRequest,
    UpdatePurchaseOrderRequest,
)
from buildops.application.dto.responses import (
    AccountResponse,
    ActivityEntryResponse,
    DeleteResponse,
    ErrorResponse,
    HealthResponse,
    InventoryItemResponse,
    InventoryListResponse,
    ProviderHealthResponse,
    PurchaseOrderListResponse,
    PurchaseOrderResponse,
    TransactionListResponse,
    TransactionResponse,
    WorkflowResultResponse,
)

__all__ = [
    # Requests
    "CreatePurchaseOrderRequest",
    "UpdatePurchaseOrderRequest",
    "TransitionStatusRequest",
    "CreateInventoryItemRequest",
    "UpdateInventoryItemRequest",
    "AdjustStockRequest",
    "CreateTransactionRequest",
    "CreateAccountRequest",
    "UpdateAccountRequest",
    # Responses
    "PurchaseOrderResponse",
    "PurchaseOrderListResponse",
    "InventoryItemResponse",
    "InventoryListResponse",
    "TransactionResponse",
    "TransactionListResponse",
    "AccountResponse",
    "ActivityEntryResponse",
    "WorkflowResultResponse",
    "DeleteResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ErrorResponse",
    # Mappers
    "order_to_response",
    "item_to_response",
    "transaction_to_response",
    "account_to_response",
    "activity_to_response",
    "workflow_result_to_response",
]
