"""Update Purchase Order Use Case."""

from buildops.application.dto.mappers import order_to_response
from buildops.application.dto.requests import UpdatePurchaseOrderRequest
from buildops.application.dto.responses import PurchaseOrderResponse
from buildops.config import get_logger
from buildops.core.entities import PurchaseOrder
from buildops.core.exceptions import RecordNotFoundError
from buildops.core.interfaces import IInventoryStore, IPurchaseOrderStore

logger = get_logger(__name__)


class UpdatePurchaseOrderUseCase:
    """
    Edit a purchase order's item, quantities and references.

    The item name is re-snapshotted and total cost recomputed. Status is left
    alone; it only moves through the procurement workflow.
    """

    def __init__(
        self,
        order_store: IPurchaseOrderStore | None = None,
        inventory_store: IInventoryStore | None = None,
    ):
        self._order_store = order_store
        self._inventory_store = inventory_store

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

    async def execute(
        self, order_id: str, request: UpdatePurchaseOrderRequest
    ) -> PurchaseOrder:
        """Execute update purchase order use case."""
        order_store = await self._get_order_store()
        order = await order_store.get_order(order_id)
        if order is None:
            raise RecordNotFoundError("purchase_order", order_id)

        inv_store = await self._get_inventory_store()
        item = await inv_store.get_item(request.item_id)
        if item is None:
            raise RecordNotFoundError("inventory_item", request.item_id)

        order.item_id = item.id
        order.item_name = item.name
        order.supplier_id = request.supplier_id
        order.project_id = request.project_id
        order.reprice(request.quantity, request.unit_cost)

        order = await order_store.update_order(order)
        logger.info(
            "po_updated",
            order_id=order.id,
            total_cost=order.total_cost,
            status=order.status.value,
        )
        return order

    def to_response(self, order: PurchaseOrder) -> PurchaseOrderResponse:
        """Convert result to API response."""
        return order_to_response(order)
