"""Pytest fixtures for SQLite storage tests."""

from pathlib import Path

import pytest

from buildops.core.entities import Account, InventoryItem, PurchaseOrder
from buildops.infrastructure.storage.sqlite import (
    SQLiteAccountStore,
    SQLiteActivityLog,
    SQLiteInventoryStore,
    SQLiteLedgerStore,
    SQLitePurchaseOrderStore,
)


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def order_store(sqlite_db: Path) -> SQLitePurchaseOrderStore:
    return SQLitePurchaseOrderStore()


@pytest.fixture
def item_store(sqlite_db: Path) -> SQLiteInventoryStore:
    return SQLiteInventoryStore()


@pytest.fixture
def ledger_store(sqlite_db: Path) -> SQLiteLedgerStore:
    return SQLiteLedgerStore()


@pytest.fixture
def account_store(sqlite_db: Path) -> SQLiteAccountStore:
    return SQLiteAccountStore()


@pytest.fixture
def activity_log(sqlite_db: Path) -> SQLiteActivityLog:
    return SQLiteActivityLog()


@pytest.fixture
async def stored_item(item_store: SQLiteInventoryStore) -> InventoryItem:
    """Inventory item with 5 units (Low Stock)."""
    return await item_store.create_item(
        InventoryItem(name="Cement bags", category="Materials", quantity=5, warehouse="Main Yard")
    )


@pytest.fixture
async def stored_order(
    order_store: SQLitePurchaseOrderStore, stored_item: InventoryItem
) -> PurchaseOrder:
    """Pending order for 100 x 5.0 of the stored item."""
    return await order_store.create_order(
        PurchaseOrder(
            item_id=stored_item.id,
            item_name=stored_item.name,
            quantity=100,
            unit_cost=5.0,
            supplier_id="sup-1",
            project_id="proj-1",
        )
    )


@pytest.fixture
async def stored_account(account_store: SQLiteAccountStore) -> Account:
    return await account_store.create_account(
        Account(name="Operating", bank_name="First Builders Bank")
    )
