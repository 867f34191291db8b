"""Unit tests for ProcurementWorkflowService with mocked stores."""

import pytest

from buildops.core.entities import (
    ActivityType,
    FinancialTransaction,
    PurchaseOrderStatus,
    StockStatus,
    TransactionType,
)
from buildops.core.exceptions import ConflictError, DatabaseError
from buildops.core.services import ProcurementWorkflowService

S = PurchaseOrderStatus


@pytest.fixture
def service(uow, order_store, inventory_store, ledger_store, account_store, activity_log):
    return ProcurementWorkflowService(
        unit_of_work=uow,
        order_store=order_store,
        inventory_store=inventory_store,
        ledger_store=ledger_store,
        account_store=account_store,
        activity_log=activity_log,
    )


class TestTransitionStatus:
    async def test_pending_to_approved(self, service, uow, order_store, ledger_store, make_order):
        order_store.get_order.return_value = make_order(S.PENDING)

        result = await service.transition_status("po-1", "Approved")

        assert result.success
        assert result.status == "Approved"
        assert result.message == "Purchase Order status updated to Approved."
        assert result.transaction is None
        order_store.update_status.assert_awaited_once()
        ledger_store.create_transaction.assert_not_awaited()
        assert uow.commits == 1

    async def test_pending_to_rejected(self, service, order_store, make_order):
        order_store.get_order.return_value = make_order(S.PENDING)

        result = await service.transition_status("po-1", "Rejected")

        assert result.success
        assert result.order.status is S.REJECTED

    async def test_accepts_enum_value(self, service, order_store, make_order):
        order_store.get_order.return_value = make_order(S.PENDING)

        result = await service.transition_status("po-1", S.APPROVED)

        assert result.success
        assert result.status == "Approved"

    @pytest.mark.parametrize(
        ("current", "requested"),
        [
            (S.PENDING, "Ordered"),
            (S.PENDING, "Received"),
            (S.APPROVED, "Rejected"),
            (S.APPROVED, "Pending"),
            (S.ORDERED, "Approved"),
            (S.REJECTED, "Approved"),
            (S.RECEIVED, "Ordered"),
            (S.PENDING, "Teleported"),
        ],
    )
    async def test_illegal_transition_leaves_order_unchanged(
        self, service, uow, order_store, ledger_store, make_order, current, requested
    ):
        order_store.get_order.return_value = make_order(current)

        result = await service.transition_status("po-1", requested)

        assert not result.success
        assert result.error.kind == "InvalidTransition"
        assert result.error.details == {"current": current.value, "requested": requested}
        order_store.update_status.assert_not_awaited()
        ledger_store.create_transaction.assert_not_awaited()
        assert uow.rollbacks == 1

    async def test_missing_order(self, service, order_store):
        order_store.get_order.return_value = None

        result = await service.transition_status("nope", "Approved")

        assert not result.success
        assert result.error.kind == "RecordNotFound"
        assert result.error.code == "PURCHASE_ORDER_NOT_FOUND"

    async def test_ordered_books_one_expense(
        self, service, order_store, ledger_store, make_order
    ):
        order_store.get_order.return_value = make_order(S.APPROVED)

        result = await service.transition_status("po-1", "Ordered")

        assert result.success
        assert result.status == "Ordered"
        ledger_store.create_transaction.assert_awaited_once()
        tx: FinancialTransaction = ledger_store.create_transaction.await_args.args[0]
        assert tx.type is TransactionType.EXPENSE
        assert tx.amount == 500.0
        assert tx.description == "Purchase Order for: Cement bags"
        assert tx.purchase_order_id == "po-1"
        assert tx.project_id == "proj-1"
        assert tx.supplier_id == "sup-1"
        assert tx.account_id == "acc-1"
        assert result.transaction is tx

    async def test_ordered_skips_existing_transaction(
        self, service, order_store, ledger_store, account_store, make_order
    ):
        order_store.get_order.return_value = make_order(S.APPROVED)
        ledger_store.find_transaction_by_order_id.return_value = FinancialTransaction(
            description="Purchase Order for: Cement bags",
            amount=500.0,
            type=TransactionType.EXPENSE,
            purchase_order_id="po-1",
        )

        result = await service.transition_status("po-1", "Ordered")

        assert result.success
        assert result.status == "Ordered"
        assert result.transaction is None
        ledger_store.create_transaction.assert_not_awaited()
        account_store.get_default_account.assert_not_awaited()
        order_store.update_status.assert_awaited_once()

    async def test_repeated_ordered_call_is_noop(
        self, service, order_store, ledger_store, activity_log, make_order
    ):
        order_store.get_order.return_value = make_order(S.ORDERED)
        ledger_store.find_transaction_by_order_id.return_value = FinancialTransaction(
            description="Purchase Order for: Cement bags",
            amount=500.0,
            type=TransactionType.EXPENSE,
            purchase_order_id="po-1",
        )

        result = await service.transition_status("po-1", "Ordered")

        assert result.success
        assert result.status == "Ordered"
        assert result.transaction is None
        order_store.update_status.assert_not_awaited()
        ledger_store.create_transaction.assert_not_awaited()
        activity_log.append.assert_not_awaited()

    async def test_ordered_to_ordered_without_booking_is_invalid(
        self, service, order_store, ledger_store, make_order
    ):
        order_store.get_order.return_value = make_order(S.ORDERED)

        result = await service.transition_status("po-1", "Ordered")

        assert not result.success
        assert result.error.kind == "InvalidTransition"
        ledger_store.create_transaction.assert_not_awaited()

    async def test_ordered_without_account_fails(
        self, service, uow, order_store, ledger_store, account_store, make_order
    ):
        order_store.get_order.return_value = make_order(S.APPROVED)
        account_store.get_default_account.return_value = None

        result = await service.transition_status("po-1", "Ordered")

        assert not result.success
        assert result.error.kind == "NoAccountConfigured"
        ledger_store.create_transaction.assert_not_awaited()
        order_store.update_status.assert_not_awaited()
        assert uow.rollbacks == 1

    async def test_ordered_with_zero_total_fails_validation(
        self, service, order_store, ledger_store, make_order
    ):
        order_store.get_order.return_value = make_order(S.APPROVED, unit_cost=0.0)

        result = await service.transition_status("po-1", "Ordered")

        assert not result.success
        assert result.error.kind == "ValidationError"
        ledger_store.create_transaction.assert_not_awaited()

    async def test_status_write_failure_rolls_back_ledger_entry(
        self, service, uow, order_store, make_order
    ):
        order_store.get_order.return_value = make_order(S.APPROVED)
        order_store.update_status.side_effect = ConflictError("purchase_order", "po-1")

        result = await service.transition_status("po-1", "Ordered")

        assert not result.success
        assert result.error.kind == "Conflict"
        assert uow.rollbacks == 1
        assert uow.commits == 0

    async def test_activity_entries_after_commit(
        self, service, order_store, activity_log, make_order
    ):
        order_store.get_order.return_value = make_order(S.APPROVED)

        await service.transition_status("po-1", "Ordered")

        types = [c.args[0].type for c in activity_log.append.await_args_list]
        assert types == [ActivityType.TRANSACTION_ADDED, ActivityType.PO_STATUS_CHANGED]

    async def test_activity_failure_does_not_fail_operation(
        self, service, order_store, activity_log, make_order
    ):
        order_store.get_order.return_value = make_order(S.PENDING)
        activity_log.append.side_effect = RuntimeError("log down")

        result = await service.transition_status("po-1", "Approved")

        assert result.success

    async def test_no_activity_on_failure(self, service, order_store, activity_log, make_order):
        order_store.get_order.return_value = make_order(S.RECEIVED)

        await service.transition_status("po-1", "Approved")

        activity_log.append.assert_not_awaited()

    async def test_works_without_activity_log(
        self, uow, order_store, inventory_store, ledger_store, account_store, make_order
    ):
        service = ProcurementWorkflowService(
            uow, order_store, inventory_store, ledger_store, account_store
        )
        order_store.get_order.return_value = make_order(S.PENDING)

        result = await service.transition_status("po-1", "Approved")

        assert result.success


class TestReceivePurchaseOrder:
    async def test_receive_adds_quantity_and_recomputes_status(
        self, service, uow, order_store, inventory_store, make_order, make_item
    ):
        order_store.get_order.return_value = make_order(S.ORDERED)
        inventory_store.get_item.return_value = make_item(quantity=5)

        result = await service.receive_purchase_order("po-1")

        assert result.success
        assert result.status == "Received"
        assert result.message == "Order marked as received and inventory updated."
        assert result.item.quantity == 105
        assert result.item.status is StockStatus.IN_STOCK
        assert result.order.status is S.RECEIVED
        assert uow.commits == 1

    @pytest.mark.parametrize("status", [S.PENDING, S.APPROVED, S.REJECTED, S.RECEIVED])
    async def test_receive_requires_ordered(
        self, service, order_store, inventory_store, make_order, status
    ):
        order_store.get_order.return_value = make_order(status)

        result = await service.receive_purchase_order("po-1")

        assert not result.success
        assert result.error.kind == "InvalidTransition"
        inventory_store.update_item.assert_not_awaited()

    async def test_receive_missing_order(self, service, order_store):
        order_store.get_order.return_value = None

        result = await service.receive_purchase_order("po-x")

        assert result.error.kind == "RecordNotFound"

    async def test_receive_unlinked_order(self, service, order_store, inventory_store, make_order):
        order_store.get_order.return_value = make_order(S.ORDERED, item_id=None)

        result = await service.receive_purchase_order("po-1")

        assert result.error.kind == "UnlinkedItem"
        inventory_store.get_item.assert_not_awaited()

    async def test_receive_missing_item(self, service, order_store, inventory_store, make_order):
        order_store.get_order.return_value = make_order(S.ORDERED)
        inventory_store.get_item.return_value = None

        result = await service.receive_purchase_order("po-1")

        assert result.error.kind == "RecordNotFound"
        assert result.error.code == "INVENTORY_ITEM_NOT_FOUND"

    async def test_order_write_failure_rolls_back(
        self, service, uow, order_store, inventory_store, make_order, make_item
    ):
        order_store.get_order.return_value = make_order(S.ORDERED)
        inventory_store.get_item.return_value = make_item(quantity=5)
        order_store.update_status.side_effect = DatabaseError("update", "disk I/O error")

        result = await service.receive_purchase_order("po-1")

        assert not result.success
        assert result.error.kind == "StorageFailure"
        assert uow.rollbacks == 1
        assert uow.commits == 0

    async def test_inventory_conflict_reported(
        self, service, order_store, inventory_store, make_order, make_item
    ):
        order_store.get_order.return_value = make_order(S.ORDERED)
        inventory_store.get_item.return_value = make_item(quantity=5)
        inventory_store.update_item.side_effect = ConflictError("inventory_item", "item-1")

        result = await service.receive_purchase_order("po-1")

        assert result.error.kind == "Conflict"
        order_store.update_status.assert_not_awaited()

    async def test_receipt_activity(
        self, service, order_store, inventory_store, activity_log, make_order, make_item
    ):
        order_store.get_order.return_value = make_order(S.ORDERED)
        inventory_store.get_item.return_value = make_item(quantity=5)

        await service.receive_purchase_order("po-1")

        entry = activity_log.append.await_args.args[0]
        assert entry.type is ActivityType.PO_RECEIVED
        assert entry.link == "/procurement/po-1"
