"""Inventory domain entities."""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

# Fixed for every item category.
LOW_STOCK_THRESHOLD = 10


class StockStatus(str, Enum):
    """Stock-level tier derived from on-hand quantity."""

    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


def derive_stock_status(quantity: int) -> StockStatus:
    """Classify an on-hand quantity into its stock-level tier."""
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class InventoryItem(BaseModel):
    """Stocked item with quantity and derived stock status."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    category: str = ""
    quantity: int = Field(default=0, ge=0)
    warehouse: str = ""
    status: StockStatus = StockStatus.OUT_OF_STOCK
    version: int = 0
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def model_post_init(self, __context: object) -> None:
        self.status = derive_stock_status(self.quantity)

    def set_quantity(self, quantity: int) -> None:
        """Set quantity and recompute status in one step."""
        self.quantity = quantity
        self.status = derive_stock_status(quantity)
