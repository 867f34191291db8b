"""Tests for SQLite ledger, account and activity stores."""

from datetime import datetime

import aiosqlite
import pytest

from buildops.core.entities import (
    Account,
    ActivityEntry,
    ActivityType,
    FinancialTransaction,
    TransactionType,
)
from buildops.core.exceptions import RecordNotFoundError


def _expense(**overrides) -> FinancialTransaction:
    data = {
        "description": "Purchase of 100 Cement bags",
        "amount": 500.0,
        "type": TransactionType.EXPENSE,
        "date": datetime.utcnow(),
    }
    data.update(overrides)
    return FinancialTransaction(**data)


class TestAccountStore:
    async def test_no_accounts_no_default(self, account_store):
        assert await account_store.get_default_account() is None

    async def test_oldest_account_is_default(self, account_store, stored_account):
        await account_store.create_account(Account(name="Payroll", bank_name="Bank Two"))

        assert await account_store.get_default_account() == stored_account.id

    async def test_flagged_account_wins(self, account_store, stored_account):
        flagged = await account_store.create_account(
            Account(name="Projects", bank_name="Bank Two", is_default=True)
        )

        assert await account_store.get_default_account() == flagged.id

    async def test_new_default_clears_previous(self, account_store):
        first = await account_store.create_account(
            Account(name="A", bank_name="Bank", is_default=True)
        )
        second = await account_store.create_account(
            Account(name="B", bank_name="Bank", is_default=True)
        )

        accounts = {a.id: a for a in await account_store.list_accounts()}
        assert accounts[first.id].is_default is False
        assert accounts[second.id].is_default is True

    async def test_update_to_default_clears_previous(self, account_store):
        first = await account_store.create_account(
            Account(name="A", bank_name="Bank", is_default=True)
        )
        second = await account_store.create_account(Account(name="B", bank_name="Bank"))

        second.is_default = True
        second.name = "B renamed"
        await account_store.update_account(second)

        accounts = {a.id: a for a in await account_store.list_accounts()}
        assert accounts[first.id].is_default is False
        assert accounts[second.id].is_default is True
        assert accounts[second.id].name == "B renamed"
        assert await account_store.get_default_account() == second.id

    async def test_update_missing_account(self, account_store):
        with pytest.raises(RecordNotFoundError):
            await account_store.update_account(Account(id="ghost", name="X", bank_name="Bank"))


class TestLedgerStore:
    async def test_find_by_order(self, ledger_store, stored_account):
        tx = await ledger_store.create_transaction(
            _expense(purchase_order_id="po-1", account_id=stored_account.id)
        )

        found = await ledger_store.find_transaction_by_order_id("po-1")

        assert found is not None
        assert found.id == tx.id
        assert found.amount == 500.0
        assert await ledger_store.find_transaction_by_order_id("po-2") is None

    async def test_one_transaction_per_order(self, ledger_store):
        await ledger_store.create_transaction(_expense(purchase_order_id="po-1"))

        with pytest.raises(aiosqlite.IntegrityError):
            await ledger_store.create_transaction(_expense(purchase_order_id="po-1"))

    async def test_manual_transactions_not_unique(self, ledger_store):
        await ledger_store.create_transaction(_expense(description="Rent"))
        await ledger_store.create_transaction(_expense(description="Rent"))

        assert len(await ledger_store.list_transactions()) == 2

    async def test_count_for_account(self, ledger_store, stored_account):
        await ledger_store.create_transaction(_expense(account_id=stored_account.id))

        assert await ledger_store.count_for_account(stored_account.id) == 1
        assert await ledger_store.count_for_account("other") == 0

    async def test_list_by_type(self, ledger_store):
        await ledger_store.create_transaction(_expense())
        await ledger_store.create_transaction(
            _expense(description="Client payment", type=TransactionType.INCOME)
        )

        income = await ledger_store.list_transactions(type=TransactionType.INCOME)

        assert [t.description for t in income] == ["Client payment"]

    async def test_delete(self, ledger_store):
        tx = await ledger_store.create_transaction(_expense())

        assert await ledger_store.delete_transaction(tx.id) is True
        assert await ledger_store.get_transaction(tx.id) is None


class TestActivityLog:
    async def test_newest_first(self, activity_log):
        await activity_log.append(
            ActivityEntry(message="first", type=ActivityType.PO_CREATED, link="/procurement/1")
        )
        await activity_log.append(
            ActivityEntry(message="second", type=ActivityType.PO_RECEIVED, link="/procurement/1")
        )

        entries = await activity_log.list_recent(limit=10)

        assert [e.message for e in entries] == ["second", "first"]
        assert entries[0].type is ActivityType.PO_RECEIVED

    async def test_limit(self, activity_log):
        for i in range(3):
            await activity_log.append(
                ActivityEntry(message=f"m{i}", type=ActivityType.INVENTORY_ADDED, link="/inventory")
            )

        assert len(await activity_log.list_recent(limit=2)) == 2
