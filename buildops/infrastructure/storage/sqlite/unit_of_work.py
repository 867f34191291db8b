"""SQLite unit of work: one BEGIN IMMEDIATE transaction shared by all stores."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiosqlite

from buildops.config import get_logger
from buildops.core.exceptions import ConflictError, DatabaseError
from buildops.core.interfaces.unit_of_work import IUnitOfWork
from buildops.infrastructure.storage.sqlite.connection import get_transaction

logger = get_logger(__name__)

_CONFLICT_MARKERS = ("database is locked", "database is busy", "database table is locked")


def _is_lock_error(error: aiosqlite.Error) -> bool:
    text = str(error).lower()
    return any(marker in text for marker in _CONFLICT_MARKERS)


class SQLiteUnitOfWork(IUnitOfWork):
    """
    Transactional boundary over the global connection pool.

    Stores called inside ``transaction()`` join the same connection through
    the ambient transaction. Lock timeouts and unique-index races surface as
    ConflictError; other driver errors as DatabaseError.
    """

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        try:
            async with get_transaction(immediate=True):
                yield
        except aiosqlite.OperationalError as e:
            if _is_lock_error(e):
                logger.warning("transaction_conflict", error=str(e))
                raise ConflictError("database", reason=str(e)) from e
            raise DatabaseError("transaction", str(e)) from e
        except aiosqlite.IntegrityError as e:
            if "UNIQUE constraint failed" in str(e):
                logger.warning("transaction_conflict", error=str(e))
                raise ConflictError("database", reason=str(e)) from e
            raise DatabaseError("transaction", str(e)) from e
        except aiosqlite.Error as e:
            raise DatabaseError("transaction", str(e)) from e
