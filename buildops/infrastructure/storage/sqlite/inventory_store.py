"""SQLite implementation of inventory storage."""

from datetime import datetime

import aiosqlite

from buildops.config import get_logger
from buildops.core.entities.inventory import InventoryItem, StockStatus, derive_stock_status
from buildops.core.exceptions import ConflictError
from buildops.core.interfaces.inventory_store import IInventoryStore
from buildops.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from buildops.infrastructure.storage.sqlite.rows import parse_timestamp

logger = get_logger(__name__)


class SQLiteInventoryStore(IInventoryStore):
    """SQLite implementation of inventory item storage."""

    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create a new inventory item."""
        now = datetime.utcnow()
        item.created_at = now
        item.updated_at = now
        item.status = derive_stock_status(item.quantity)
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO inventory_items (
                    id, name, name_lowercase, category, quantity, warehouse,
                    status, version, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.id,
                    item.name,
                    item.name.lower(),
                    item.category,
                    item.quantity,
                    item.warehouse,
                    item.status.value,
                    item.version,
                    item.created_at.isoformat(),
                    item.updated_at.isoformat(),
                ),
            )
            logger.info(
                "inventory_item_created",
                item_id=item.id,
                quantity=item.quantity,
                stock_status=item.status.value,
            )
            return item

    async def get_item(self, item_id: str) -> InventoryItem | None:
        """Get inventory item by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_items WHERE id = ?", (item_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_inventory_item(row)

    async def update_item(self, item: InventoryItem) -> InventoryItem:
        """Update inventory item; status is always rewritten from quantity."""
        updated_at = datetime.utcnow()
        status = derive_stock_status(item.quantity)
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE inventory_items SET
                    name = ?,
                    name_lowercase = ?,
                    category = ?,
                    quantity = ?,
                    warehouse = ?,
                    status = ?,
                    version = version + 1,
                    updated_at = ?
                WHERE id = ? AND version = ?
                """,
                (
                    item.name,
                    item.name.lower(),
                    item.category,
                    item.quantity,
                    item.warehouse,
                    status.value,
                    updated_at.isoformat(),
                    item.id,
                    item.version,
                ),
            )
            if cursor.rowcount == 0:
                raise ConflictError("inventory_item", item.id, "version changed")
            item.status = status
            item.version += 1
            item.updated_at = updated_at
            logger.info(
                "inventory_item_updated",
                item_id=item.id,
                quantity=item.quantity,
                stock_status=status.value,
            )
            return item

    async def delete_item(self, item_id: str) -> bool:
        """Delete an inventory item."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM inventory_items WHERE id = ?", (item_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("inventory_item_deleted", item_id=item_id)
            return deleted

    async def list_items(
        self,
        status: StockStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[InventoryItem]:
        """List inventory items by name."""
        async with get_connection() as conn:
            if status is not None:
                cursor = await conn.execute(
                    """
                    SELECT * FROM inventory_items
                    WHERE status = ?
                    ORDER BY name_lowercase
                    LIMIT ? OFFSET ?
                    """,
                    (status.value, limit, offset),
                )
            else:
                cursor = await conn.execute(
                    """
                    SELECT * FROM inventory_items
                    ORDER BY name_lowercase
                    LIMIT ? OFFSET ?
                    """,
                    (limit, offset),
                )
            rows = await cursor.fetchall()
            return [self._row_to_inventory_item(row) for row in rows]

    async def list_low_stock(self, limit: int = 100) -> list[InventoryItem]:
        """List items that are low on stock or out of stock, emptiest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM inventory_items
                WHERE status IN (?, ?)
                ORDER BY quantity ASC, name_lowercase
                LIMIT ?
                """,
                (StockStatus.OUT_OF_STOCK.value, StockStatus.LOW_STOCK.value, limit),
            )
            rows = await cursor.fetchall()
            return [self._row_to_inventory_item(row) for row in rows]

    @staticmethod
    def _row_to_inventory_item(row: aiosqlite.Row) -> InventoryItem:
        """Convert a database row to an InventoryItem entity."""
        return InventoryItem(
            id=row["id"],
            name=row["name"],
            category=row["category"] or "",
            quantity=int(row["quantity"]),
            warehouse=row["warehouse"] or "",
            version=int(row["version"]),
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
