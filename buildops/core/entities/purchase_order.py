"""
Purchase order domain entities.

The purchase order is the aggregate root of the procurement workflow.
Its status moves forward through ALLOWED_TRANSITIONS only; receipt is a
separate operation gated on the ORDERED status.
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field


class PurchaseOrderStatus(str, Enum):
    """Lifecycle status of a purchase order."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    ORDERED = "Ordered"
    RECEIVED = "Received"


ALLOWED_TRANSITIONS: dict[PurchaseOrderStatus, frozenset[PurchaseOrderStatus]] = {
    PurchaseOrderStatus.PENDING: frozenset(
        {PurchaseOrderStatus.APPROVED, PurchaseOrderStatus.REJECTED}
    ),
    PurchaseOrderStatus.APPROVED: frozenset({PurchaseOrderStatus.ORDERED}),
}

TERMINAL_STATUSES = frozenset(
    {PurchaseOrderStatus.REJECTED, PurchaseOrderStatus.RECEIVED}
)


def is_transition_allowed(current: PurchaseOrderStatus, requested: str) -> bool:
    """Check a requested status (possibly an unknown string) against the table."""
    try:
        target = PurchaseOrderStatus(requested)
    except ValueError:
        return False
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


class PurchaseOrder(BaseModel):
    """Request to procure an inventory item from a supplier for a project."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    item_id: str | None = None
    item_name: str
    quantity: int = Field(gt=0)
    unit_cost: float = Field(ge=0)
    total_cost: float = 0.0
    supplier_id: str
    project_id: str
    status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING
    version: int = 0
    requested_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def model_post_init(self, __context: object) -> None:
        self.total_cost = self.quantity * self.unit_cost

    def reprice(self, quantity: int, unit_cost: float) -> None:
        """Change quantity and unit cost, keeping total_cost consistent."""
        self.quantity = quantity
        self.unit_cost = unit_cost
        self.total_cost = quantity * unit_cost

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES
