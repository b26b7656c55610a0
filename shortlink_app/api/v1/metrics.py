from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from shortlink_app.schemas.metrics import LeaderboardEntry
from shortlink_app.schemas.error import INTERNAL_ERROR_RESPONSE
from shortlink_app.services.leaderboard import LeaderboardReporter
from shortlink_app.dependencies import get_leaderboard_reporter

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get("", response_model=List[LeaderboardEntry], responses=INTERNAL_ERROR_RESPONSE)
async def get_leaderboard(
    request: Request,
    limit: Optional[int] = Query(None, ge=1, description="Number of links to return"),
    reporter: LeaderboardReporter = Depends(get_leaderboard_reporter)
):
    """
    Most-clicked links, highest click count first.
    
    A limit above leaderboard_max_limit is clamped to it.
    Counts are eventually consistent: a click whose redirect was just
    served may not be visible yet.
    """
    settings = request.app.state.settings
    if limit is None:
        limit = settings.leaderboard_limit
    limit = min(limit, settings.leaderboard_max_limit)
    return await reporter.report(limit)
