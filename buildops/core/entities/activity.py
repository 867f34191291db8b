"""Activity log entity."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ActivityType(str, Enum):
    """Kinds of activity recorded in the audit trail."""

    PO_CREATED = "PO_CREATED"
    PO_DELETED = "PO_DELETED"
    PO_STATUS_CHANGED = "PO_STATUS_CHANGED"
    PO_RECEIVED = "PO_RECEIVED"
    TRANSACTION_ADDED = "TRANSACTION_ADDED"
    INVENTORY_ADDED = "INVENTORY_ADDED"
    INVENTORY_UPDATED = "INVENTORY_UPDATED"
    INVENTORY_DELETED = "INVENTORY_DELETED"
    INVENTORY_ADJUSTED = "INVENTORY_ADJUSTED"


class ActivityEntry(BaseModel):
    """Informational audit entry describing a change."""

    id: int | None = None
    message: str
    type: ActivityType
    link: str | None = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)
