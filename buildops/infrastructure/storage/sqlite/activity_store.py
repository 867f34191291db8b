"""SQLite implementation of the activity log."""

import aiosqlite

from buildops.config import get_logger
from buildops.core.entities.activity import ActivityEntry, ActivityType
from buildops.core.interfaces.activity_log import IActivityLog
from buildops.infrastructure.storage.sqlite.connection import get_connection, get_pool
from buildops.infrastructure.storage.sqlite.rows import parse_timestamp

logger = get_logger(__name__)


class SQLiteActivityLog(IActivityLog):
    """
    Activity log backed by the activity_log table.

    Appends always use their own pooled connection and commit, so an entry
    is never bound to (or rolled back with) a caller's transaction.
    """

    async def append(self, entry: ActivityEntry) -> ActivityEntry:
        """Record an activity entry."""
        pool = await get_pool()
        async with pool.transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO activity_log (message, type, link, timestamp)
                VALUES (?, ?, ?, ?)
                """,
                (
                    entry.message,
                    entry.type.value,
                    entry.link,
                    entry.timestamp.isoformat(),
                ),
            )
            entry.id = cursor.lastrowid
            logger.debug("activity_recorded", entry_id=entry.id, type=entry.type.value)
            return entry

    async def list_recent(self, limit: int = 50) -> list[ActivityEntry]:
        """List most recent entries first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM activity_log
                ORDER BY timestamp DESC, id DESC
                LIMIT ?
                """,
                (limit,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_entry(row) for row in rows]

    @staticmethod
    def _row_to_entry(row: aiosqlite.Row) -> ActivityEntry:
        """Convert a database row to an ActivityEntry."""
        return ActivityEntry(
            id=row["id"],
            message=row["message"],
            type=ActivityType(row["type"]),
            link=row["link"],
            timestamp=parse_timestamp(row["timestamp"]),
        )
