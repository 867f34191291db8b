"""Abstract interface for inventory storage."""

from abc import ABC, abstractmethod

from buildops.core.entities.inventory import InventoryItem, StockStatus


class IInventoryStore(ABC):
    """Interface for inventory item persistence."""

    @abstractmethod
    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create a new inventory item."""
        pass

    @abstractmethod
    async def get_item(self, item_id: str) -> InventoryItem | None:
        """Get inventory item by ID."""
        pass

    @abstractmethod
    async def update_item(self, item: InventoryItem) -> InventoryItem:
        """
        Write item fields, quantity and status.

        Fails with ConflictError if the stored version no longer matches.
        """
        pass

    @abstractmethod
    async def delete_item(self, item_id: str) -> bool:
        """Delete an inventory item. Returns False if it did not exist."""
        pass

    @abstractmethod
    async def list_items(
        self,
        status: StockStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[InventoryItem]:
        """List inventory items, optionally filtered by stock status."""
        pass

    @abstractmethod
    async def list_low_stock(self, limit: int = 100) -> list[InventoryItem]:
        """List items that are low on stock or out of stock."""
        pass
