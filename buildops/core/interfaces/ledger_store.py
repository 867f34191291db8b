"""Abstract interfaces for ledger and account storage."""

from abc import ABC, abstractmethod

from buildops.core.entities.ledger import Account, FinancialTransaction, TransactionType


class ILedgerStore(ABC):
    """Interface for financial transaction persistence."""

    @abstractmethod
    async def find_transaction_by_order_id(
        self, order_id: str
    ) -> FinancialTransaction | None:
        """Find the transaction booked for a purchase order, if any."""
        pass

    @abstractmethod
    async def create_transaction(
        self, transaction: FinancialTransaction
    ) -> FinancialTransaction:
        """Append a transaction to the ledger."""
        pass

    @abstractmethod
    async def get_transaction(self, transaction_id: str) -> FinancialTransaction | None:
        """Get transaction by ID."""
        pass

    @abstractmethod
    async def list_transactions(
        self,
        type: TransactionType | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[FinancialTransaction]:
        """List transactions, newest first."""
        pass

    @abstractmethod
    async def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a manually recorded transaction."""
        pass

    @abstractmethod
    async def count_for_account(self, account_id: str) -> int:
        """Count transactions booked against an account."""
        pass


class IAccountStore(ABC):
    """Interface for bank/payment account persistence."""

    @abstractmethod
    async def get_default_account(self) -> str | None:
        """Resolve the account ID that order expenses are booked against."""
        pass

    @abstractmethod
    async def create_account(self, account: Account) -> Account:
        """Create a new account."""
        pass

    @abstractmethod
    async def get_account(self, account_id: str) -> Account | None:
        """Get account by ID."""
        pass

    @abstractmethod
    async def list_accounts(self) -> list[Account]:
        """List all accounts, oldest first."""
        pass

    @abstractmethod
    async def update_account(self, account: Account) -> Account:
        """Update an account; a new default clears the previous one."""
        pass

    @abstractmethod
    async def delete_account(self, account_id: str) -> bool:
        """Delete an account. Returns False if it did not exist."""
        pass
