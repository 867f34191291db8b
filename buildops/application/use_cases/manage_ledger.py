"""Ledger use cases: manual transactions and account maintenance."""

from datetime import datetime

from buildops.application.dto.mappers import account_to_response, transaction_to_response
from buildops.application.dto.requests import CreateTransactionRequest, UpdateAccountRequest
from buildops.application.dto.responses import (
    AccountResponse,
    DeleteResponse,
    TransactionResponse,
)
from buildops.config import get_logger
from buildops.core.entities import Account, FinancialTransaction
from buildops.core.exceptions import AccountInUseError, RecordNotFoundError
from buildops.core.interfaces import IAccountStore, ILedgerStore

logger = get_logger(__name__)


class _LedgerUseCase:
    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        account_store: IAccountStore | None = None,
    ):
        self._ledger_store = ledger_store
        self._account_store = account_store

    async def _get_ledger_store(self) -> ILedgerStore:
        if self._ledger_store is None:
            from buildops.infrastructure.storage.sqlite import get_ledger_store

            self._ledger_store = await get_ledger_store()
        return self._ledger_store

    async def _get_account_store(self) -> IAccountStore:
        if self._account_store is None:
            from buildops.infrastructure.storage.sqlite import get_account_store

            self._account_store = await get_account_store()
        return self._account_store


class RecordTransactionUseCase(_LedgerUseCase):
    """Record a manual income or expense entry."""

    async def execute(self, request: CreateTransactionRequest) -> FinancialTransaction:
        if request.account_id is not None:
            accounts = await self._get_account_store()
            if await accounts.get_account(request.account_id) is None:
                raise RecordNotFoundError("account", request.account_id)

        ledger = await self._get_ledger_store()
        transaction = await ledger.create_transaction(
            FinancialTransaction(
                description=request.description,
                amount=request.amount,
                type=request.type,
                date=request.date or datetime.utcnow(),
                account_id=request.account_id,
                project_id=request.project_id,
                supplier_id=request.supplier_id,
            )
        )
        logger.info(
            "manual_transaction_recorded",
            transaction_id=transaction.id,
            type=transaction.type.value,
            amount=transaction.amount,
        )
        return transaction

    def to_response(self, transaction: FinancialTransaction) -> TransactionResponse:
        """Convert result to API response."""
        return transaction_to_response(transaction)


class DeleteAccountUseCase(_LedgerUseCase):
    """Delete an account that has no transactions booked against it."""

    async def execute(self, account_id: str) -> DeleteResponse:
        accounts = await self._get_account_store()
        if await accounts.get_account(account_id) is None:
            raise RecordNotFoundError("account", account_id)

        ledger = await self._get_ledger_store()
        booked = await ledger.count_for_account(account_id)
        if booked > 0:
            logger.warning("account_delete_blocked", account_id=account_id, transactions=booked)
            raise AccountInUseError(account_id)

        await accounts.delete_account(account_id)
        return DeleteResponse(success=True, message="Account deleted successfully.")


class UpdateAccountUseCase(_LedgerUseCase):
    """Edit an account's details or make it the default."""

    async def execute(self, account_id: str, request: UpdateAccountRequest) -> Account:
        accounts = await self._get_account_store()
        existing = await accounts.get_account(account_id)
        if existing is None:
            raise RecordNotFoundError("account", account_id)

        account = existing.model_copy(update=request.model_dump())
        account = await accounts.update_account(account)
        logger.info(
            "account_details_updated",
            account_id=account_id,
            was_default=existing.is_default,
            is_default=account.is_default,
        )
        return account

    def to_response(self, account: Account) -> AccountResponse:
        return account_to_response(account)
