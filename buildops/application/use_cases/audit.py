"""Activity log helper shared by the CRUD use cases."""

from buildops.config import get_logger
from buildops.core.entities.activity import ActivityEntry
from buildops.core.interfaces import IActivityLog

logger = get_logger(__name__)


async def get_default_activity_log() -> IActivityLog:
    from buildops.infrastructure.storage.sqlite import get_activity_log

    return await get_activity_log()


async def record_activity(activity_log: IActivityLog, entry: ActivityEntry) -> None:
    """Append an entry; failures are logged and never reach the caller."""
    try:
        await activity_log.append(entry)
    except Exception as e:
        logger.warning("activity_log_failed", type=entry.type.value, error=str(e))
