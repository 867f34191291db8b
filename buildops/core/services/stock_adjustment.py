"""Stock adjustment service: manual receipts and consumption outside the PO flow."""

from buildops.config import get_logger
from buildops.core.entities.activity import ActivityEntry, ActivityType
from buildops.core.exceptions import (
    NegativeStockError,
    ProcurementError,
    RecordNotFoundError,
    ValidationError,
)
from buildops.core.interfaces import IActivityLog, IInventoryStore, IUnitOfWork
from buildops.core.services.results import WorkflowResult

logger = get_logger(__name__)


class StockAdjustmentService:
    """Apply signed quantity deltas to inventory items."""

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        inventory_store: IInventoryStore,
        activity_log: IActivityLog | None = None,
    ):
        self._uow = unit_of_work
        self._inventory = inventory_store
        self._activity = activity_log

    async def adjust_stock(self, item_id: str, delta: int) -> WorkflowResult:
        """
        Add delta to an item's quantity and recompute its stock status.

        Rejects the adjustment outright if the result would be negative.
        """
        logger.info("stock_adjust_started", item_id=item_id, delta=delta)

        try:
            if isinstance(delta, bool) or not isinstance(delta, int) or delta == 0:
                raise ValidationError("delta", "Adjustment must be a nonzero integer", delta)

            async with self._uow.transaction():
                item = await self._inventory.get_item(item_id)
                if item is None:
                    raise RecordNotFoundError("inventory_item", item_id)

                new_qty = item.quantity + delta
                if new_qty < 0:
                    raise NegativeStockError(item_id, item.quantity, delta)

                item.set_quantity(new_qty)
                item = await self._inventory.update_item(item)

        except ProcurementError as e:
            logger.warning(
                "stock_adjust_failed",
                item_id=item_id,
                delta=delta,
                kind=e.kind,
                error=e.message,
            )
            return WorkflowResult.failure(e)

        logger.info(
            "stock_adjust_complete",
            item_id=item_id,
            new_qty=item.quantity,
            stock_status=item.status.value,
        )

        if self._activity is not None:
            try:
                await self._activity.append(
                    ActivityEntry(
                        message=f'Stock for "{item.name}" adjusted by {delta:+d}',
                        type=ActivityType.INVENTORY_ADJUSTED,
                        link="/inventory",
                    )
                )
            except Exception as e:
                logger.warning("activity_log_failed", type="INVENTORY_ADJUSTED", error=str(e))

        return WorkflowResult(
            success=True,
            message="Stock adjusted successfully.",
            status=item.status.value,
            item=item,
        )
