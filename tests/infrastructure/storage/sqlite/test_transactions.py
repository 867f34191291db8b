"""Tests for the connection pool, ambient transactions and unit of work."""

from pathlib import Path

import aiosqlite
import pytest

import buildops.infrastructure.storage.sqlite.connection as conn_module
from buildops.core.entities import InventoryItem
from buildops.core.exceptions import ConflictError, DatabaseError
from buildops.infrastructure.storage.sqlite import SQLiteUnitOfWork
from buildops.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    get_connection,
    get_transaction,
    in_transaction,
)


class TestConnectionPool:
    def test_defaults(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path)

        assert pool.pool_size == 5
        assert pool.busy_timeout == 5000
        assert pool._initialized is False

    async def test_initialize_opens_connections(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=2)
        try:
            await pool.initialize()
            assert len(pool._connections) == 2
            async with pool.acquire() as conn:
                cursor = await conn.execute("PRAGMA foreign_keys")
                assert (await cursor.fetchone())[0] == 1
        finally:
            await pool.close()

    async def test_transaction_rolls_back_on_error(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=1)
        try:
            async with pool.transaction() as conn:
                await conn.execute("CREATE TABLE t (x INTEGER)")
            with pytest.raises(RuntimeError):
                async with pool.transaction() as conn:
                    await conn.execute("INSERT INTO t VALUES (1)")
                    raise RuntimeError("boom")
            async with pool.acquire() as conn:
                cursor = await conn.execute("SELECT COUNT(*) FROM t")
                assert (await cursor.fetchone())[0] == 0
        finally:
            await pool.close()


class TestAmbientTransaction:
    async def test_nested_calls_share_connection(self, sqlite_db: Path):
        async with get_transaction() as outer:
            assert in_transaction()
            async with get_connection() as inner:
                assert inner is outer
            async with get_transaction() as nested:
                assert nested is outer
        assert not in_transaction()


class TestUnitOfWork:
    async def test_commits_all_writes(self, sqlite_db: Path, item_store):
        uow = SQLiteUnitOfWork()

        async with uow.transaction():
            await item_store.create_item(InventoryItem(name="Sand", quantity=1))
            await item_store.create_item(InventoryItem(name="Gravel", quantity=2))

        assert len(await item_store.list_items()) == 2

    async def test_rolls_back_all_writes(self, sqlite_db: Path, item_store):
        uow = SQLiteUnitOfWork()

        with pytest.raises(RuntimeError):
            async with uow.transaction():
                await item_store.create_item(InventoryItem(name="Sand", quantity=1))
                raise RuntimeError("boom")

        assert await item_store.list_items() == []

    async def test_unique_violation_is_conflict(self, sqlite_db: Path, ledger_store):
        from buildops.core.entities import FinancialTransaction, TransactionType

        uow = SQLiteUnitOfWork()
        tx = dict(description="PO", amount=1.0, type=TransactionType.EXPENSE, purchase_order_id="po-1")
        await ledger_store.create_transaction(FinancialTransaction(**tx))

        with pytest.raises(ConflictError):
            async with uow.transaction():
                await ledger_store.create_transaction(FinancialTransaction(**tx))

    async def test_other_driver_errors_are_database_errors(self, sqlite_db: Path):
        uow = SQLiteUnitOfWork()

        with pytest.raises(DatabaseError):
            async with uow.transaction():
                async with get_connection() as conn:
                    await conn.execute("SELECT * FROM no_such_table")

    async def test_held_write_lock_is_conflict(self, sqlite_db: Path):
        await conn_module.close_pool()
        conn_module._pool = ConnectionPool(sqlite_db, pool_size=1, busy_timeout=50)

        blocker = await aiosqlite.connect(sqlite_db)
        try:
            await blocker.execute("BEGIN IMMEDIATE")
            with pytest.raises(ConflictError):
                async with SQLiteUnitOfWork().transaction():
                    pass
        finally:
            await blocker.rollback()
            await blocker.close()
