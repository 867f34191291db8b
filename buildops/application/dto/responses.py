"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class PurchaseOrderResponse(BaseModel):
    """Purchase order response DTO."""

    id: str = Field(..., description="Purchase order ID")
    item_id: str | None = Field(default=None, description="Linked inventory item ID")
    item_name: str = Field(..., description="Item name at time of request")
    quantity: int = Field(..., description="Units ordered")
    unit_cost: float = Field(..., description="Cost per unit")
    total_cost: float = Field(..., description="quantity * unit_cost")
    supplier_id: str = Field(..., description="Supplier reference")
    project_id: str = Field(..., description="Project reference")
    status: str = Field(..., description="Lifecycle status")
    version: int = Field(..., description="Concurrency version")
    requested_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last write timestamp")


class PurchaseOrderListResponse(BaseModel):
    """List of purchase orders."""

    items: list[PurchaseOrderResponse]
    total: int


class InventoryItemResponse(BaseModel):
    """Inventory item response DTO."""

    id: str = Field(..., description="Inventory item ID")
    name: str
    category: str
    quantity: int = Field(..., description="Units on hand")
    warehouse: str
    status: str = Field(..., description="Derived stock status")
    version: int
    created_at: datetime
    updated_at: datetime


class InventoryListResponse(BaseModel):
    """List of inventory items."""

    items: list[InventoryItemResponse]
    total: int


class TransactionResponse(BaseModel):
    """Ledger transaction response DTO."""

    id: str
    description: str
    amount: float
    type: str = Field(..., description="Income or Expense")
    date: datetime
    purchase_order_id: str | None = None
    project_id: str | None = None
    supplier_id: str | None = None
    account_id: str | None = None
    created_at: datetime


class TransactionListResponse(BaseModel):
    """List of ledger transactions."""

    items: list[TransactionResponse]
    total: int


class AccountResponse(BaseModel):
    """Bank/payment account response DTO."""

    id: str
    name: str
    bank_name: str
    account_number: str | None = None
    initial_balance: float
    is_default: bool
    created_at: datetime


class ActivityEntryResponse(BaseModel):
    """Activity log entry."""

    id: int | None = None
    message: str
    type: str
    link: str | None = None
    timestamp: datetime


class WorkflowResultResponse(BaseModel):
    """Successful outcome of a workflow operation."""

    success: bool = True
    message: str
    status: str | None = Field(default=None, description="Resulting status")
    order: PurchaseOrderResponse | None = None
    item: InventoryItemResponse | None = None
    transaction: TransactionResponse | None = Field(
        default=None, description="Ledger entry created by the operation, if any"
    )


class DeleteResponse(BaseModel):
    """Outcome of a delete."""

    success: bool
    message: str


class ProviderHealthResponse(BaseModel):
    """Provider health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable failure kind (e.g. InvalidTransition)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable failure kind")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Specific error code or details")
    details: dict[str, Any] = Field(default_factory=dict, description="Structured context")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
