"""SQLite implementation of purchase order storage."""

from datetime import datetime

import aiosqlite

from buildops.config import get_logger
from buildops.core.entities.purchase_order import PurchaseOrder, PurchaseOrderStatus
from buildops.core.exceptions import ConflictError
from buildops.core.interfaces.purchase_order_store import IPurchaseOrderStore
from buildops.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from buildops.infrastructure.storage.sqlite.rows import parse_timestamp

logger = get_logger(__name__)


class SQLitePurchaseOrderStore(IPurchaseOrderStore):
    """SQLite implementation of purchase order storage."""

    async def create_order(self, order: PurchaseOrder) -> PurchaseOrder:
        """Create a new purchase order."""
        now = datetime.utcnow()
        order.requested_at = now
        order.updated_at = now
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO purchase_orders (
                    id, item_id, item_name, quantity, unit_cost, total_cost,
                    supplier_id, project_id, status, version,
                    requested_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    order.id,
                    order.item_id,
                    order.item_name,
                    order.quantity,
                    order.unit_cost,
                    order.total_cost,
                    order.supplier_id,
                    order.project_id,
                    order.status.value,
                    order.version,
                    order.requested_at.isoformat(),
                    order.updated_at.isoformat(),
                ),
            )
            logger.info(
                "purchase_order_created",
                order_id=order.id,
                item_id=order.item_id,
                total_cost=order.total_cost,
            )
            return order

    async def get_order(self, order_id: str) -> PurchaseOrder | None:
        """Get purchase order by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM purchase_orders WHERE id = ?", (order_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_order(row)

    async def update_order(self, order: PurchaseOrder) -> PurchaseOrder:
        """Write editable order fields; total_cost is recomputed from quantity and unit cost."""
        order.reprice(order.quantity, order.unit_cost)
        return await self._write(
            order,
            """
            UPDATE purchase_orders SET
                item_id = ?,
                item_name = ?,
                quantity = ?,
                unit_cost = ?,
                total_cost = ?,
                supplier_id = ?,
                project_id = ?,
                version = version + 1,
                updated_at = ?
            WHERE id = ? AND version = ?
            """,
            lambda o: (
                o.item_id,
                o.item_name,
                o.quantity,
                o.unit_cost,
                o.total_cost,
                o.supplier_id,
                o.project_id,
            ),
            event="purchase_order_updated",
        )

    async def update_status(self, order: PurchaseOrder) -> PurchaseOrder:
        """Write the order status, guarded by its version."""
        return await self._write(
            order,
            """
            UPDATE purchase_orders SET
                status = ?,
                version = version + 1,
                updated_at = ?
            WHERE id = ? AND version = ?
            """,
            lambda o: (o.status.value,),
            event="purchase_order_status_written",
        )

    async def _write(self, order: PurchaseOrder, sql: str, values, event: str) -> PurchaseOrder:
        updated_at = datetime.utcnow()
        async with get_transaction() as conn:
            cursor = await conn.execute(
                sql,
                (*values(order), updated_at.isoformat(), order.id, order.version),
            )
            if cursor.rowcount == 0:
                raise ConflictError("purchase_order", order.id, "version changed")
            order.version += 1
            order.updated_at = updated_at
            logger.info(event, order_id=order.id, status=order.status.value, version=order.version)
            return order

    async def delete_order(self, order_id: str) -> bool:
        """Delete a purchase order."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM purchase_orders WHERE id = ?", (order_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("purchase_order_deleted", order_id=order_id)
            return deleted

    async def list_orders(
        self,
        status: PurchaseOrderStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[PurchaseOrder]:
        """List purchase orders, newest first."""
        async with get_connection() as conn:
            if status is not None:
                cursor = await conn.execute(
                    """
                    SELECT * FROM purchase_orders
                    WHERE status = ?
                    ORDER BY requested_at DESC
                    LIMIT ? OFFSET ?
                    """,
                    (status.value, limit, offset),
                )
            else:
                cursor = await conn.execute(
                    """
                    SELECT * FROM purchase_orders
                    ORDER BY requested_at DESC
                    LIMIT ? OFFSET ?
                    """,
                    (limit, offset),
                )
            rows = await cursor.fetchall()
            return [self._row_to_order(row) for row in rows]

    @staticmethod
    def _row_to_order(row: aiosqlite.Row) -> PurchaseOrder:
        """Convert a database row to a PurchaseOrder entity."""
        return PurchaseOrder(
            id=row["id"],
            item_id=row["item_id"],
            item_name=row["item_name"],
            quantity=int(row["quantity"]),
            unit_cost=float(row["unit_cost"]),
            supplier_id=row["supplier_id"],
            project_id=row["project_id"],
            status=PurchaseOrderStatus(row["status"]),
            version=int(row["version"]),
            requested_at=parse_timestamp(row["requested_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
