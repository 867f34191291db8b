"""Unit tests for ledger entities."""

import pytest
from pydantic import ValidationError

from buildops.core.entities.activity import ActivityEntry, ActivityType
from buildops.core.entities.ledger import Account, FinancialTransaction, TransactionType


class TestFinancialTransaction:
    def test_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            FinancialTransaction(description="x", amount=0, type=TransactionType.EXPENSE)

    def test_references_optional(self):
        tx = FinancialTransaction(description="Rent", amount=1200, type=TransactionType.EXPENSE)
        assert tx.purchase_order_id is None
        assert tx.account_id is None

    def test_type_from_string(self):
        tx = FinancialTransaction(description="Invoice paid", amount=10, type="Income")
        assert tx.type is TransactionType.INCOME


class TestAccount:
    def test_defaults(self):
        account = Account(name="Operating", bank_name="Bank")
        assert account.is_default is False
        assert account.initial_balance == 0.0


class TestActivityEntry:
    def test_timestamp_defaults(self):
        entry = ActivityEntry(message="PO created", type=ActivityType.PO_CREATED)
        assert entry.timestamp is not None
        assert entry.id is None
