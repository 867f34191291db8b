"""Core domain entities."""

from buildops.core.entities.activity import ActivityEntry, ActivityType
from buildops.core.entities.inventory import (
    LOW_STOCK_THRESHOLD,
    InventoryItem,
    StockStatus,
    derive_stock_status,
)
from buildops.core.entities.ledger import Account, FinancialTransaction, TransactionType
from buildops.core.entities.purchase_order import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    PurchaseOrder,
    PurchaseOrderStatus,
    is_transition_allowed,
)

__all__ = [
    # Purchase order entities
    "PurchaseOrder",
    "PurchaseOrderStatus",
    "ALLOWED_TRANSITIONS",
    "TERMINAL_STATUSES",
    "is_transition_allowed",
    # Inventory entities
    "InventoryItem",
    "StockStatus",
    "LOW_STOCK_THRESHOLD",
    "derive_stock_status",
    # Ledger entities
    "Account",
    "FinancialTransaction",
    "TransactionType",
    # Activity entities
    "ActivityEntry",
    "ActivityType",
]
