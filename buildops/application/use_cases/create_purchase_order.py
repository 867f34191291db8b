"""Create Purchase Order Use Case."""

from buildops.application.dto.mappers import order_to_response
from buildops.application.dto.requests import CreatePurchaseOrderRequest
from buildops.application.dto.responses import PurchaseOrderResponse
from buildops.application.use_cases.audit import get_default_activity_log, record_activity
from buildops.config import get_logger
from buildops.core.entities import ActivityEntry, ActivityType, PurchaseOrder
from buildops.core.exceptions import RecordNotFoundError
from buildops.core.interfaces import IActivityLog, IInventoryStore, IPurchaseOrderStore

logger = get_logger(__name__)


class CreatePurchaseOrderUseCase:
    """Raise a Pending purchase order for an existing inventory item."""

    def __init__(
        self,
        order_store: IPurchaseOrderStore | None = None,
        inventory_store: IInventoryStore | None = None,
        activity_log: IActivityLog | None = None,
    ):
        self._order_store = order_store
        self._inventory_store = inventory_store
        self._activity_log = activity_log

    async def _get_order_store(self) -> IPurchaseOrderStore:
        if self._order_store is None:
            from buildops.infrastructure.storage.sqlite import get_purchase_order_store

            self._order_store = await get_purchase_order_store()
        return self._order_store

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from buildops.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def _get_activity_log(self) -> IActivityLog:
        if self._activity_log is None:
            self._activity_log = await get_default_activity_log()
        return self._activity_log

    async def execute(self, request: CreatePurchaseOrderRequest) -> PurchaseOrder:
        """Execute create purchase order use case."""
        logger.info(
            "create_po_started",
            item_id=request.item_id,
            quantity=request.quantity,
        )

        # 1. The item must exist; its name is snapshotted onto the order
        inv_store = await self._get_inventory_store()
        item = await inv_store.get_item(request.item_id)
        if item is None:
            raise RecordNotFoundError("inventory_item", request.item_id)

        # 2. Persist in Pending with total computed from quantity and unit cost
        order = PurchaseOrder(
            item_id=item.id,
            item_name=item.name,
            quantity=request.quantity,
            unit_cost=request.unit_cost,
            supplier_id=request.supplier_id,
            project_id=request.project_id,
        )
        order_store = await self._get_order_store()
        order = await order_store.create_order(order)

        logger.info("create_po_complete", order_id=order.id, total_cost=order.total_cost)

        await record_activity(
            await self._get_activity_log(),
            ActivityEntry(
                message=f"New PO created for {item.name}",
                type=ActivityType.PO_CREATED,
                link=f"/procurement/{order.id}",
            ),
        )
        return order

    def to_response(self, order: PurchaseOrder) -> PurchaseOrderResponse:
        """Convert result to API response."""
        return order_to_response(order)
