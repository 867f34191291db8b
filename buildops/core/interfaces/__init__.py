"""Core interfaces (ports) for dependency injection."""

from buildops.core.interfaces.activity_log import IActivityLog
from buildops.core.interfaces.inventory_store import IInventoryStore
from buildops.core.interfaces.ledger_store import IAccountStore, ILedgerStore
from buildops.core.interfaces.purchase_order_store import IPurchaseOrderStore
from buildops.core.interfaces.unit_of_work import IUnitOfWork

__all__ = [
    # Storage interfaces
    "IPurchaseOrderStore",
    "IInventoryStore",
    "ILedgerStore",
    "IAccountStore",
    "IActivityLog",
    # Transaction boundary
    "IUnitOfWork",
]
