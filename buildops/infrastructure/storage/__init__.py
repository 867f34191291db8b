"""Storage infrastructure implementations."""

from buildops.infrastructure.storage.sqlite import (
    SQLiteAccountStore,
    SQLiteActivityLog,
    SQLiteInventoryStore,
    SQLiteLedgerStore,
    SQLitePurchaseOrderStore,
    SQLiteUnitOfWork,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLitePurchaseOrderStore",
    "SQLiteInventoryStore",
    "SQLiteLedgerStore",
    "SQLiteAccountStore",
    "SQLiteActivityLog",
    "SQLiteUnitOfWork",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
