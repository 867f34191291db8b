"""Abstract interface for purchase order storage."""

from abc import ABC, abstractmethod

from buildops.core.entities.purchase_order import PurchaseOrder, PurchaseOrderStatus


class IPurchaseOrderStore(ABC):
    """Interface for purchase order persistence."""

    @abstractmethod
    async def create_order(self, order: PurchaseOrder) -> PurchaseOrder:
        """Create a new purchase order."""
        pass

    @abstractmethod
    async def get_order(self, order_id: str) -> PurchaseOrder | None:
        """Get purchase order by ID."""
        pass

    @abstractmethod
    async def update_order(self, order: PurchaseOrder) -> PurchaseOrder:
        """Write editable order fields (item, quantity, costs, supplier, project)."""
        pass

    @abstractmethod
    async def update_status(self, order: PurchaseOrder) -> PurchaseOrder:
        """
        Write the order's status.

        Fails with ConflictError if the stored version no longer matches.
        """
        pass

    @abstractmethod
    async def delete_order(self, order_id: str) -> bool:
        """Delete a purchase order. Returns False if it did not exist."""
        pass

    @abstractmethod
    async def list_orders(
        self,
        status: PurchaseOrderStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[PurchaseOrder]:
        """List purchase orders, newest first."""
        pass
