"""Delete Purchase Order Use Case."""

from buildops.application.dto.responses import DeleteResponse
from buildops.application.use_cases.audit import get_default_activity_log, record_activity
from buildops.config import get_logger
from buildops.core.entities import ActivityEntry, ActivityType
from buildops.core.exceptions import RecordNotFoundError
from buildops.core.interfaces import IActivityLog, IPurchaseOrderStore

logger = get_logger(__name__)


class DeletePurchaseOrderUseCase:
    """Delete a purchase order and note it in the activity log."""

    def __init__(
        self,
        order_store: IPurchaseOrderStore | None = None,
        activity_log: IActivityLog | None = None,
    ):
        self._order_store = order_store
        self._activity_log = activity_log

    async def _get_order_store(self) -> IPurchaseOrderStore:
        if self._order_store is None:
            from buildops.infrastructure.storage.sqlite import get_purchase_order_store

            self._order_store = await get_purchase_order_store()
        return self._order_store

    async def execute(self, order_id: str) -> DeleteResponse:
        store = await self._get_order_store()
        order = await store.get_order(order_id)
        if order is None:
            raise RecordNotFoundError("purchase_order", order_id)

        if not await store.delete_order(order_id):
            raise RecordNotFoundError("purchase_order", order_id)

        if self._activity_log is None:
            self._activity_log = await get_default_activity_log()
        await record_activity(
            self._activity_log,
            ActivityEntry(
                message=f"Purchase Order deleted for: {order.item_name}",
                type=ActivityType.PO_DELETED,
                link="/procurement",
            ),
        )
        return DeleteResponse(success=True, message="Purchase order deleted successfully.")
