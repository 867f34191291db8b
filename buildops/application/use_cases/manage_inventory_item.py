"""Inventory item use cases: add, edit and delete stocked items."""

from buildops.application.dto.mappers import item_to_response
from buildops.application.dto.requests import (
    CreateInventoryItemRequest,
    UpdateInventoryItemRequest,
)
from buildops.application.dto.responses import DeleteResponse, InventoryItemResponse
from buildops.application.use_cases.audit import get_default_activity_log, record_activity
from buildops.config import get_logger
from buildops.core.entities import ActivityEntry, ActivityType, InventoryItem
from buildops.core.exceptions import RecordNotFoundError
from buildops.core.interfaces import IActivityLog, IInventoryStore

logger = get_logger(__name__)


class _InventoryUseCase:
    def __init__(
        self,
        inventory_store: IInventoryStore | None = None,
        activity_log: IActivityLog | None = None,
    ):
        self._inventory_store = inventory_store
        self._activity_log = activity_log

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from buildops.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def _record(self, message: str, activity_type: ActivityType) -> None:
        if self._activity_log is None:
            self._activity_log = await get_default_activity_log()
        await record_activity(
            self._activity_log,
            ActivityEntry(message=message, type=activity_type, link="/inventory"),
        )

    def to_response(self, item: InventoryItem) -> InventoryItemResponse:
        """Convert result to API response."""
        return item_to_response(item)


class AddInventoryItemUseCase(_InventoryUseCase):
    """Add a new item; its stock status is derived from the quantity."""

    async def execute(self, request: CreateInventoryItemRequest) -> InventoryItem:
        store = await self._get_inventory_store()
        item = await store.create_item(
            InventoryItem(
                name=request.name,
                category=request.category,
                quantity=request.quantity,
                warehouse=request.warehouse,
            )
        )
        await self._record(
            f"New item added to inventory: {item.name}", ActivityType.INVENTORY_ADDED
        )
        return item


class UpdateInventoryItemUseCase(_InventoryUseCase):
    """Edit an item. A caller cannot set status; it follows the quantity."""

    async def execute(
        self, item_id: str, request: UpdateInventoryItemRequest
    ) -> InventoryItem:
        store = await self._get_inventory_store()
        item = await store.get_item(item_id)
        if item is None:
            raise RecordNotFoundError("inventory_item", item_id)

        item.name = request.name
        item.category = request.category
        item.warehouse = request.warehouse
        item.set_quantity(request.quantity)
        item = await store.update_item(item)

        await self._record(
            f"Inventory item updated: {item.name}", ActivityType.INVENTORY_UPDATED
        )
        return item


class DeleteInventoryItemUseCase(_InventoryUseCase):
    """
    Delete an item.

    Purchase orders that referenced it keep their name snapshot but lose the
    link, so they can no longer be received automatically.
    """

    async def execute(self, item_id: str) -> DeleteResponse:
        store = await self._get_inventory_store()
        item = await store.get_item(item_id)
        if item is None:
            raise RecordNotFoundError("inventory_item", item_id)

        if not await store.delete_item(item_id):
            raise RecordNotFoundError("inventory_item", item_id)

        await self._record(
            f"Inventory item deleted: {item.name}", ActivityType.INVENTORY_DELETED
        )
        return DeleteResponse(success=True, message="Item deleted successfully.")
