"""
Procurement workflow service.

Enforces the purchase-order state machine and performs the side effects each
transition implies:
- Approved/Rejected: status write only
- Ordered: status write plus one Expense ledger entry (idempotent per order)
- Received: inventory quantity increase plus status write

Each operation runs inside a single unit-of-work transaction. Audit entries
are appended after commit and never affect the outcome.
"""

from buildops.config import get_logger
from buildops.core.entities.activity import ActivityEntry, ActivityType
from buildops.core.entities.ledger import FinancialTransaction, TransactionType
from buildops.core.entities.purchase_order import (
    PurchaseOrder,
    PurchaseOrderStatus,
    is_transition_allowed,
)
from buildops.core.exceptions import (
    InvalidTransitionError,
    NoAccountConfiguredError,
    ProcurementError,
    RecordNotFoundError,
    UnlinkedItemError,
    ValidationError,
)
from buildops.core.interfaces import (
    IAccountStore,
    IActivityLog,
    IInventoryStore,
    ILedgerStore,
    IPurchaseOrderStore,
    IUnitOfWork,
)
from buildops.core.services.results import WorkflowResult

logger = get_logger(__name__)


class ProcurementWorkflowService:
    """Drives purchase orders through their lifecycle."""

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        order_store: IPurchaseOrderStore,
        inventory_store: IInventoryStore,
        ledger_store: ILedgerStore,
        account_store: IAccountStore,
        activity_log: IActivityLog | None = None,
    ):
        self._uow = unit_of_work
        self._orders = order_store
        self._inventory = inventory_store
        self._ledger = ledger_store
        self._accounts = account_store
        self._activity = activity_log

    async def transition_status(self, order_id: str, new_status: str) -> WorkflowResult:
        """
        Move an order to Approved, Rejected or Ordered.

        Args:
            order_id: Purchase order ID
            new_status: Requested status value

        Returns:
            WorkflowResult with the new status, or a structured failure
        """
        requested = new_status.value if isinstance(new_status, PurchaseOrderStatus) else str(new_status)
        logger.info("po_transition_started", order_id=order_id, requested=requested)

        created = None
        already_ordered = False
        try:
            async with self._uow.transaction():
                order = await self._orders.get_order(order_id)
                if order is None:
                    raise RecordNotFoundError("purchase_order", order_id)

                # A repeated Ordered call on a booked order is a no-op.
                if (
                    order.status is PurchaseOrderStatus.ORDERED
                    and requested == PurchaseOrderStatus.ORDERED.value
                ):
                    already_ordered = (
                        await self._ledger.find_transaction_by_order_id(order.id) is not None
                    )

                if not already_ordered:
                    if not is_transition_allowed(order.status, requested):
                        raise InvalidTransitionError(order.status.value, requested)

                    target = PurchaseOrderStatus(requested)
                    if target is PurchaseOrderStatus.ORDERED:
                        created = await self._book_order_expense(order)

                    order.status = target
                    order = await self._orders.update_status(order)

        except ProcurementError as e:
            logger.warning(
                "po_transition_failed",
                order_id=order_id,
                requested=requested,
                kind=e.kind,
                error=e.message,
            )
            return WorkflowResult.failure(e)

        if already_ordered:
            logger.info("po_already_ordered", order_id=order_id)
            return WorkflowResult(
                success=True,
                message="Purchase Order is already Ordered.",
                status=order.status.value,
                order=order,
            )

        logger.info(
            "po_transition_complete",
            order_id=order_id,
            status=order.status.value,
            transaction_id=created.id if created else None,
        )

        if created is not None:
            await self._record_activity(
                ActivityEntry(
                    message=(
                        f"Expense of {created.amount:,.2f} recorded for PO: {order.item_name}"
                    ),
                    type=ActivityType.TRANSACTION_ADDED,
                    link="/financials",
                )
            )
        await self._record_activity(
            ActivityEntry(
                message=f'PO for "{order.item_name}" status changed to {order.status.value}',
                type=ActivityType.PO_STATUS_CHANGED,
                link=f"/procurement/{order.id}",
            )
        )

        return WorkflowResult(
            success=True,
            message=f"Purchase Order status updated to {order.status.value}.",
            status=order.status.value,
            order=order,
            transaction=created,
        )

    async def receive_purchase_order(self, order_id: str) -> WorkflowResult:
        """
        Receive an Ordered purchase order into its linked inventory item.

        Args:
            order_id: Purchase order ID

        Returns:
            WorkflowResult with status Received and the updated item
        """
        logger.info("po_receipt_started", order_id=order_id)

        try:
            async with self._uow.transaction():
                order = await self._orders.get_order(order_id)
                if order is None:
                    raise RecordNotFoundError("purchase_order", order_id)

                if order.status is not PurchaseOrderStatus.ORDERED:
                    raise InvalidTransitionError(
                        order.status.value, PurchaseOrderStatus.RECEIVED.value
                    )
                if not order.item_id:
                    raise UnlinkedItemError(order_id)

                item = await self._inventory.get_item(order.item_id)
                if item is None:
                    raise RecordNotFoundError("inventory_item", order.item_id)

                previous_qty = item.quantity
                item.set_quantity(previous_qty + order.quantity)
                item = await self._inventory.update_item(item)

                order.status = PurchaseOrderStatus.RECEIVED
                order = await self._orders.update_status(order)

        except ProcurementError as e:
            logger.warning(
                "po_receipt_failed",
                order_id=order_id,
                kind=e.kind,
                error=e.message,
            )
            return WorkflowResult.failure(e)

        logger.info(
            "po_receipt_complete",
            order_id=order_id,
            item_id=item.id,
            old_qty=previous_qty,
            new_qty=item.quantity,
            stock_status=item.status.value,
        )

        await self._record_activity(
            ActivityEntry(
                message=(
                    f'PO for "{order.item_name}" received: +{order.quantity} '
                    f"({item.name} now {item.quantity})"
                ),
                type=ActivityType.PO_RECEIVED,
                link=f"/procurement/{order.id}",
            )
        )

        return WorkflowResult(
            success=True,
            message="Order marked as received and inventory updated.",
            status=order.status.value,
            order=order,
            item=item,
        )

    async def _book_order_expense(self, order: PurchaseOrder) -> FinancialTransaction | None:
        """Create the order's Expense entry unless one already exists."""
        # Amount drift since the first booking is not checked.
        existing = await self._ledger.find_transaction_by_order_id(order.id)
        if existing is not None:
            logger.info(
                "po_expense_already_booked",
                order_id=order.id,
                transaction_id=existing.id,
            )
            return None

        account_id = await self._accounts.get_default_account()
        if account_id is None:
            raise NoAccountConfiguredError()

        if order.total_cost <= 0:
            raise ValidationError(
                "total_cost", "Ordered purchase must have a positive total", order.total_cost
            )

        return await self._ledger.create_transaction(
            FinancialTransaction(
                description=f"Purchase Order for: {order.item_name}",
                amount=order.total_cost,
                type=TransactionType.EXPENSE,
                account_id=account_id,
                project_id=order.project_id,
                supplier_id=order.supplier_id,
                purchase_order_id=order.id,
            )
        )

    async def _record_activity(self, entry: ActivityEntry) -> None:
        if self._activity is None:
            return
        try:
            await self._activity.append(entry)
        except Exception as e:
            logger.warning("activity_log_failed", type=entry.type.value, error=str(e))
