"""SQLite implementation of ledger (financial transaction) and account storage."""

from datetime import datetime

import aiosqlite

from buildops.config import get_logger
from buildops.core.entities.ledger import Account, FinancialTransaction, TransactionType
from buildops.core.exceptions import RecordNotFoundError
from buildops.core.interfaces.ledger_store import IAccountStore, ILedgerStore
from buildops.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from buildops.infrastructure.storage.sqlite.rows import parse_timestamp

logger = get_logger(__name__)


class SQLiteLedgerStore(ILedgerStore):
    """SQLite implementation of financial transaction storage."""

    async def find_transaction_by_order_id(
        self, order_id: str
    ) -> FinancialTransaction | None:
        """Find the transaction booked for a purchase order."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM financial_transactions WHERE purchase_order_id = ? LIMIT 1",
                (order_id,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_transaction(row)

    async def create_transaction(
        self, transaction: FinancialTransaction
    ) -> FinancialTransaction:
        """Append a transaction to the ledger."""
        transaction.created_at = datetime.utcnow()
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO financial_transactions (
                    id, description, amount, type, date,
                    purchase_order_id, project_id, supplier_id, account_id,
                    created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    transaction.id,
                    transaction.description,
                    transaction.amount,
                    transaction.type.value,
                    transaction.date.isoformat(),
                    transaction.purchase_order_id,
                    transaction.project_id,
                    transaction.supplier_id,
                    transaction.account_id,
                    transaction.created_at.isoformat(),
                ),
            )
            logger.info(
                "transaction_created",
                transaction_id=transaction.id,
                type=transaction.type.value,
                amount=transaction.amount,
                purchase_order_id=transaction.purchase_order_id,
            )
            return transaction

    async def get_transaction(self, transaction_id: str) -> FinancialTransaction | None:
        """Get transaction by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM financial_transactions WHERE id = ?", (transaction_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_transaction(row)

    async def list_transactions(
        self,
        type: TransactionType | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[FinancialTransaction]:
        """List transactions, newest first."""
        async with get_connection() as conn:
            if type is not None:
                cursor = await conn.execute(
                    """
                    SELECT * FROM financial_transactions
                    WHERE type = ?
                    ORDER BY date DESC, created_at DESC
                    LIMIT ? OFFSET ?
                    """,
                    (type.value, limit, offset),
                )
            else:
                cursor = await conn.execute(
                    """
                    SELECT * FROM financial_transactions
                    ORDER BY date DESC, created_at DESC
                    LIMIT ? OFFSET ?
                    """,
                    (limit, offset),
                )
            rows = await cursor.fetchall()
            return [self._row_to_transaction(row) for row in rows]

    async def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM financial_transactions WHERE id = ?", (transaction_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("transaction_deleted", transaction_id=transaction_id)
            return deleted

    async def count_for_account(self, account_id: str) -> int:
        """Count transactions booked against an account."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT COUNT(*) FROM financial_transactions WHERE account_id = ?",
                (account_id,),
            )
            row = await cursor.fetchone()
            return int(row[0]) if row else 0

    @staticmethod
    def _row_to_transaction(row: aiosqlite.Row) -> FinancialTransaction:
        """Convert a database row to a FinancialTransaction entity."""
        return FinancialTransaction(
            id=row["id"],
            description=row["description"],
            amount=float(row["amount"]),
            type=TransactionType(row["type"]),
            date=parse_timestamp(row["date"]),
            purchase_order_id=row["purchase_order_id"],
            project_id=row["project_id"],
            supplier_id=row["supplier_id"],
            account_id=row["account_id"],
            created_at=parse_timestamp(row["created_at"]),
        )


class SQLiteAccountStore(IAccountStore):
    """SQLite implementation of bank/payment account storage."""

    async def get_default_account(self) -> str | None:
        """Account flagged as default, else the oldest account, else None."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT id FROM accounts
                ORDER BY is_default DESC, created_at ASC
                LIMIT 1
                """
            )
            row = await cursor.fetchone()
            return row["id"] if row else None

    async def create_account(self, account: Account) -> Account:
        """Create a new account; a new default clears the previous one."""
        account.created_at = datetime.utcnow()
        async with get_transaction() as conn:
            if account.is_default:
                await conn.execute("UPDATE accounts SET is_default = 0 WHERE is_default = 1")
            await conn.execute(
                """
                INSERT INTO accounts (
                    id, name, bank_name, account_number, initial_balance,
                    is_default, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    account.id,
                    account.name,
                    account.bank_name,
                    account.account_number,
                    account.initial_balance,
                    1 if account.is_default else 0,
                    account.created_at.isoformat(),
                ),
            )
            logger.info("account_created", account_id=account.id, is_default=account.is_default)
            return account

    async def get_account(self, account_id: str) -> Account | None:
        """Get account by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM accounts WHERE id = ?", (account_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_account(row)

    async def list_accounts(self) -> list[Account]:
        """List all accounts, oldest first."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM accounts ORDER BY created_at ASC")
            rows = await cursor.fetchall()
            return [self._row_to_account(row) for row in rows]

    async def update_account(self, account: Account) -> Account:
        """Update an account; a new default clears the previous one."""
        async with get_transaction() as conn:
            if account.is_default:
                await conn.execute(
                    "UPDATE accounts SET is_default = 0 WHERE is_default = 1 AND id != ?",
                    (account.id,),
                )
            cursor = await conn.execute(
                """
                UPDATE accounts SET
                    name = ?,
                    bank_name = ?,
                    account_number = ?,
                    initial_balance = ?,
                    is_default = ?
                WHERE id = ?
                """,
                (
                    account.name,
                    account.bank_name,
                    account.account_number,
                    account.initial_balance,
                    1 if account.is_default else 0,
                    account.id,
                ),
            )
            if cursor.rowcount == 0:
                raise RecordNotFoundError("account", account.id)
            logger.info("account_updated", account_id=account.id, is_default=account.is_default)
            return account

    async def delete_account(self, account_id: str) -> bool:
        """Delete an account."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM accounts WHERE id = ?", (account_id,))
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("account_deleted", account_id=account_id)
            return deleted

    @staticmethod
    def _row_to_account(row: aiosqlite.Row) -> Account:
        """Convert a database row to an Account entity."""
        return Account(
            id=row["id"],
            name=row["name"],
            bank_name=row["bank_name"],
            account_number=row["account_number"],
            initial_balance=float(row["initial_balance"]),
            is_default=bool(row["is_default"]),
            created_at=parse_timestamp(row["created_at"]),
        )
