"""Abstract interface for the activity (audit) log."""

from abc import ABC, abstractmethod

from buildops.core.entities.activity import ActivityEntry


class IActivityLog(ABC):
    """Append-only audit trail. Not part of any transactional boundary."""

    @abstractmethod
    async def append(self, entry: ActivityEntry) -> ActivityEntry:
        """Record an activity entry."""
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 50) -> list[ActivityEntry]:
        """List most recent entries first."""
        pass
