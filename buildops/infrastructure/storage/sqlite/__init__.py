"""SQLite storage implementations."""

from buildops.infrastructure.storage.sqlite.activity_store import SQLiteActivityLog
from buildops.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from buildops.infrastructure.storage.sqlite.inventory_store import SQLiteInventoryStore
from buildops.infrastructure.storage.sqlite.ledger_store import (
    SQLiteAccountStore,
    SQLiteLedgerStore,
)
from buildops.infrastructure.storage.sqlite.purchase_order_store import (
    SQLitePurchaseOrderStore,
)
from buildops.infrastructure.storage.sqlite.unit_of_work import SQLiteUnitOfWork

# Aliases used by the application lifespan
get_connection_pool = get_pool
close_connection_pool = close_pool

# Singleton instances
_purchase_order_store: SQLitePurchaseOrderStore | None = None
_inventory_store: SQLiteInventoryStore | None = None
_ledger_store: SQLiteLedgerStore | None = None
_account_store: SQLiteAccountStore | None = None
_activity_log: SQLiteActivityLog | None = None
_unit_of_work: SQLiteUnitOfWork | None = None


async def get_purchase_order_store() -> SQLitePurchaseOrderStore:
    """Get singleton purchase order store instance."""
    global _purchase_order_store
    if _purchase_order_store is None:
        _purchase_order_store = SQLitePurchaseOrderStore()
    return _purchase_order_store


async def get_inventory_store() -> SQLiteInventoryStore:
    """Get singleton inventory store instance."""
    global _inventory_store
    if _inventory_store is None:
        _inventory_store = SQLiteInventoryStore()
    return _inventory_store


async def get_ledger_store() -> SQLiteLedgerStore:
    """Get singleton ledger store instance."""
    global _ledger_store
    if _ledger_store is None:
        _ledger_store = SQLiteLedgerStore()
    return _ledger_store


async def get_account_store() -> SQLiteAccountStore:
    """Get singleton account store instance."""
    global _account_store
    if _account_store is None:
        _account_store = SQLiteAccountStore()
    return _account_store


async def get_activity_log() -> SQLiteActivityLog:
    """Get singleton activity log instance."""
    global _activity_log
    if _activity_log is None:
        _activity_log = SQLiteActivityLog()
    return _activity_log


async def get_unit_of_work() -> SQLiteUnitOfWork:
    """Get singleton unit of work instance."""
    global _unit_of_work
    if _unit_of_work is None:
        _unit_of_work = SQLiteUnitOfWork()
    return _unit_of_work


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    "get_connection_pool",
    "close_connection_pool",
    # Store classes
    "SQLitePurchaseOrderStore",
    "SQLiteInventoryStore",
    "SQLiteLedgerStore",
    "SQLiteAccountStore",
    "SQLiteActivityLog",
    "SQLiteUnitOfWork",
    # Factory functions
    "get_purchase_order_store",
    "get_inventory_store",
    "get_ledger_store",
    "get_account_store",
    "get_activity_log",
    "get_unit_of_work",
]
