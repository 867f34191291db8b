"""Fixtures for workflow service unit tests: mocked stores and a recording unit of work."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from buildops.core.entities import InventoryItem, PurchaseOrder, PurchaseOrderStatus
from buildops.core.interfaces import (
    IAccountStore,
    IActivityLog,
    IInventoryStore,
    ILedgerStore,
    IPurchaseOrderStore,
    IUnitOfWork,
)


class RecordingUnitOfWork(IUnitOfWork):
    """Counts commits and rollbacks instead of touching a database."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    @asynccontextmanager
    async def transaction(self):
        try:
            yield
        except BaseException:
            self.rollbacks += 1
            raise
        self.commits += 1


async def _return_first_arg(entity):
    return entity


@pytest.fixture
def uow() -> RecordingUnitOfWork:
    return RecordingUnitOfWork()


@pytest.fixture
def order_store() -> AsyncMock:
    store = AsyncMock(spec=IPurchaseOrderStore)
    store.update_status.side_effect = _return_first_arg
    return store


@pytest.fixture
def inventory_store() -> AsyncMock:
    store = AsyncMock(spec=IInventoryStore)
    store.update_item.side_effect = _return_first_arg
    return store


@pytest.fixture
def ledger_store() -> AsyncMock:
    store = AsyncMock(spec=ILedgerStore)
    store.find_transaction_by_order_id.return_value = None
    store.create_transaction.side_effect = _return_first_arg
    return store


@pytest.fixture
def account_store() -> AsyncMock:
    store = AsyncMock(spec=IAccountStore)
    store.get_default_account.return_value = "acc-1"
    return store


@pytest.fixture
def activity_log() -> AsyncMock:
    return AsyncMock(spec=IActivityLog)


@pytest.fixture
def make_order():
    def _make(status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING, **overrides):
        data = {
            "id": "po-1",
            "item_id": "item-1",
            "item_name": "Cement bags",
            "quantity": 100,
            "unit_cost": 5.0,
            "supplier_id": "sup-1",
            "project_id": "proj-1",
            "status": status,
        }
        data.update(overrides)
        return PurchaseOrder(**data)

    return _make


@pytest.fixture
def make_item():
    def _make(quantity: int = 5, **overrides):
        return InventoryItem(id="item-1", name="Cement bags", quantity=quantity, **overrides)

    return _make
