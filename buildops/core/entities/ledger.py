"""Ledger domain entities: payment accounts and financial transactions."""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field


class TransactionType(str, Enum):
    """Direction of a ledger entry."""

    INCOME = "Income"
    EXPENSE = "Expense"


class Account(BaseModel):
    """Bank or payment account that ledger entries are booked against."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    bank_name: str
    account_number: str | None = None
    initial_balance: float = 0.0
    is_default: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)


class FinancialTransaction(BaseModel):
    """Single income or expense entry in the ledger."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    description: str
    amount: float = Field(gt=0)
    type: TransactionType
    date: datetime = Field(default_factory=datetime.utcnow)
    purchase_order_id: str | None = None
    project_id: str | None = None
    supplier_id: str | None = None
    account_id: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
