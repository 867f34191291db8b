"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from buildops.core.entities.ledger import TransactionType


class CreatePurchaseOrderRequest(BaseModel):
    """Request to raise a purchase order for a stocked item.

    The item name is snapshotted from the inventory item; total cost is
    computed from quantity and unit cost.
    """

    item_id: str = Field(..., min_length=1, description="Inventory item to procure")
    quantity: int = Field(..., ge=1, description="Units to order", examples=[100])
    unit_cost: float = Field(..., ge=0, description="Cost per unit", examples=[5.0])
    supplier_id: str = Field(..., min_length=1, description="Supplier reference")
    project_id: str = Field(..., min_length=1, description="Project reference")


class UpdatePurchaseOrderRequest(CreatePurchaseOrderRequest):
    """Request to edit a purchase order. Status is changed only via transitions."""


class TransitionStatusRequest(BaseModel):
    """Request to move a purchase order to a new status."""

    status: str = Field(
        ...,
        description="Requested status",
        examples=["Approved", "Rejected", "Ordered"],
    )


class CreateInventoryItemRequest(BaseModel):
    """Request to add an inventory item. Stock status is derived from quantity."""

    name: str = Field(..., min_length=2, description="Item name", examples=["Cement bags"])
    category: str = Field(..., min_length=2, description="Item category")
    quantity: int = Field(default=0, ge=0, description="Units on hand")
    warehouse: str = Field(..., min_length=2, description="Storage location")


class UpdateInventoryItemRequest(CreateInventoryItemRequest):
    """Request to edit an inventory item."""


class AdjustStockRequest(BaseModel):
    """Signed stock adjustment; positive receives, negative consumes."""

    delta: int = Field(..., description="Nonzero quantity change", examples=[25, -3])


class CreateTransactionRequest(BaseModel):
    """Request to record a manual ledger entry."""

    description: str = Field(..., min_length=2, description="What the entry is for")
    amount: float = Field(..., gt=0, description="Positive amount")
    type: TransactionType = Field(..., description="Income or Expense")
    date: datetime | None = Field(default=None, description="Entry date (default now)")
    account_id: str | None = Field(default=None, description="Account to book against")
    project_id: str | None = Field(default=None, description="Project reference")
    supplier_id: str | None = Field(default=None, description="Supplier reference")


class CreateAccountRequest(BaseModel):
    """Request to add a bank or payment account."""

    name: str = Field(..., min_length=2, description="Account name")
    bank_name: str = Field(..., min_length=2, description="Bank name")
    account_number: str | None = Field(default=None, description="Account number")
    initial_balance: float = Field(default=0.0, description="Opening balance")
    is_default: bool = Field(
        default=False,
        description="Book purchase-order expenses against this account",
    )


class UpdateAccountRequest(CreateAccountRequest):
    """Request to edit an account."""
