"""
Fire-and-forget click counting.

The redirect path hands a link id to ClickTracker.record() and returns
immediately. The increment runs as its own asyncio task; if the counter
store is slow or down the click is logged and dropped, never retried.
"""

import asyncio
import logging
from typing import Set

from shortlink_app.counter.strategies import ClickCounterStrategy
from shortlink_app.errors import StoreUnavailable

logger = logging.getLogger(__name__)


class ClickTracker:
    """
    Schedules counter increments off the request's critical path.
    
    One instance per application. It keeps a reference to every
    in-flight task (the event loop only holds weak references) so
    they can be awaited on shutdown.
    """
    
    def __init__(self, counter: ClickCounterStrategy):
        self.counter = counter
        self._pending: Set[asyncio.Task] = set()
    
    @property
    def pending(self) -> int:
        """Number of increments not yet finished"""
        return len(self._pending)
    
    def record(self, link_id: int) -> None:
        """
        Count one click for `link_id` in the background.
        
        Must be called from a running event loop. Never raises for
        counter failures.
        """
        task = asyncio.get_running_loop().create_task(self._increment(link_id))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
    
    async def _increment(self, link_id: int) -> None:
        try:
            await self.counter.increment(link_id)
        except StoreUnavailable as e:
            logger.warning("Dropped click for link %s: %s", link_id, e)
        except Exception:
            logger.exception("Dropped click for link %s: unexpected counter error", link_id)
    
    async def drain(self) -> None:
        """Wait for every in-flight increment to finish"""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
