"""Ledger endpoints: transactions and bank/payment accounts."""

from fastapi import APIRouter, Depends, Query, status

from buildops.api.dependencies import (
    get_accounts,
    get_app_settings,
    get_delete_account_use_case,
    get_ledger,
    get_record_transaction_use_case,
    get_update_account_use_case,
)
from buildops.application.dto.mappers import account_to_response, transaction_to_response
from buildops.application.dto.requests import (
    CreateAccountRequest,
    CreateTransactionRequest,
    UpdateAccountRequest,
)
from buildops.application.dto.responses import (
    AccountResponse,
    DeleteResponse,
    ErrorResponse,
    TransactionListResponse,
    TransactionResponse,
)
from buildops.application.use_cases import (
    DeleteAccountUseCase,
    RecordTransactionUseCase,
    UpdateAccountUseCase,
)
from buildops.config import Settings
from buildops.core.entities import Account, TransactionType
from buildops.core.exceptions import RecordNotFoundError
from buildops.core.interfaces import IAccountStore, ILedgerStore

router = APIRouter(prefix="/api/financials", tags=["financials"])


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(
    type_filter: TransactionType | None = Query(default=None, alias="type"),
    limit: int | None = Query(default=None, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    store: ILedgerStore = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> TransactionListResponse:
    """List ledger transactions, newest first."""
    transactions = await store.list_transactions(
        type=type_filter,
        limit=limit or settings.api.page_size,
        offset=offset,
    )
    return TransactionListResponse(
        items=[transaction_to_response(t) for t in transactions],
        total=len(transactions),
    )


@router.post(
    "/transactions",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
async def record_transaction(
    request: CreateTransactionRequest,
    use_case: RecordTransactionUseCase = Depends(get_record_transaction_use_case),
) -> TransactionResponse:
    """Record a manual income or expense entry."""
    transaction = await use_case.execute(request)
    return use_case.to_response(transaction)


@router.delete(
    "/transactions/{transaction_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_transaction(
    transaction_id: str,
    store: ILedgerStore = Depends(get_ledger),
) -> DeleteResponse:
    """Delete a ledger transaction."""
    if not await store.delete_transaction(transaction_id):
        raise RecordNotFoundError("transaction", transaction_id)
    return DeleteResponse(success=True, message="Transaction deleted successfully.")


@router.get("/accounts", response_model=list[AccountResponse])
async def list_accounts(
    store: IAccountStore = Depends(get_accounts),
) -> list[AccountResponse]:
    """List accounts, oldest first."""
    return [account_to_response(a) for a in await store.list_accounts()]


@router.post(
    "/accounts",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_account(
    request: CreateAccountRequest,
    store: IAccountStore = Depends(get_accounts),
) -> AccountResponse:
    """Add a bank or payment account."""
    account = await store.create_account(
        Account(
            name=request.name,
            bank_name=request.bank_name,
            account_number=request.account_number,
            initial_balance=request.initial_balance,
            is_default=request.is_default,
        )
    )
    return account_to_response(account)


@router.put(
    "/accounts/{account_id}",
    response_model=AccountResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_account(
    account_id: str,
    request: UpdateAccountRequest,
    use_case: UpdateAccountUseCase = Depends(get_update_account_use_case),
) -> AccountResponse:
    """Edit an account. Making it the default clears the previous default."""
    account = await use_case.execute(account_id, request)
    return use_case.to_response(account)


@router.delete(
    "/accounts/{account_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def delete_account(
    account_id: str,
    use_case: DeleteAccountUseCase = Depends(get_delete_account_use_case),
) -> DeleteResponse:
    """Delete an account that has no transactions."""
    return await use_case.execute(account_id)
