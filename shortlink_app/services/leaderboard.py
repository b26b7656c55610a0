from typing import List

from shortlink_app.counter.strategies import ClickCounterStrategy
from shortlink_app.schemas.metrics import LeaderboardEntry

DEFAULT_LIMIT = 50


class LeaderboardReporter:
    """
    Read-only view of the click counter as a ranked leaderboard.
    
    No side effects: safe to call at any rate while clicks are being
    recorded. StoreUnavailable from the counter propagates to the caller.
    """

    def __init__(self, counter: ClickCounterStrategy):
        self.counter = counter

    async def report(self, limit: int = DEFAULT_LIMIT) -> List[LeaderboardEntry]:
        scores = await self.counter.top_n(limit)
        return [
            LeaderboardEntry(short_link_id=entry.link_id, clicks=entry.score)
            for entry in scores
        ]
