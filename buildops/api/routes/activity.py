"""Activity log endpoint."""

from fastapi import APIRouter, Depends, Query

from buildops.api.dependencies import get_activity
from buildops.application.dto.mappers import activity_to_response
from buildops.application.dto.responses import ActivityEntryResponse
from buildops.core.interfaces import IActivityLog

router = APIRouter(prefix="/api/activity", tags=["activity"])


@router.get("", response_model=list[ActivityEntryResponse])
async def list_activity(
    limit: int = Query(default=50, ge=1, le=500),
    log: IActivityLog = Depends(get_activity),
) -> list[ActivityEntryResponse]:
    """Most recent activity first."""
    return [activity_to_response(e) for e in await log.list_recent(limit=limit)]
