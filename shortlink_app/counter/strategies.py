"""
Click counter strategies using Strategy Pattern.
Allows switching between different counter backends (Redis, In-Memory).

Both backends guarantee that increments are never lost: Redis applies
ZINCRBY server-side, the in-memory store serialises updates with a lock.
Neither does a read-modify-write round trip from the caller.
"""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List

from redis.exceptions import RedisError

from shortlink_app.errors import StoreUnavailable
from .models import ClickScore


class ClickCounterStrategy(ABC):
    """
    Abstract base class for click counter stores.
    
    A ranked mapping of link id -> click count. All methods are async
    because the production backend is a network service.
    """
    
    @abstractmethod
    async def increment(self, link_id: int) -> int:
        """
        Atomically add one click to a link.
        
        Args:
            link_id: ShortLink id
            
        Returns:
            The new score
            
        Raises:
            StoreUnavailable: If the backend fails
        """
        pass
    
    @abstractmethod
    async def top_n(self, n: int) -> List[ClickScore]:
        """
        Get the n highest scores, highest first.
        
        Ties are returned in a deterministic order that does not change
        between calls unless an increment happens in between.
        
        Raises:
            StoreUnavailable: If the backend fails
        """
        pass
    
    @abstractmethod
    async def get_score(self, link_id: int) -> int:
        """Get the score of one link (0 if never clicked)"""
        pass
    
    async def close(self) -> None:
        """Release backend resources"""
        return None


class RedisClickCounter(ClickCounterStrategy):
    """
    Redis sorted set implementation.
    
    Members are link ids (as strings), scores are click counts:
    - ZINCRBY creates the member lazily and increments atomically
    - ZREVRANGE ... WITHSCORES returns the ranking already sorted
    
    Equal scores come back in Redis' member order, which is stable
    while the set is unchanged.
    """
    
    def __init__(self, redis_client, key: str = "metrics"):
        """
        Initialize Redis counter.
        
        Args:
            redis_client: redis.asyncio.Redis instance (decode_responses=True)
            key: Sorted set key
        """
        self.redis = redis_client
        self.key = key
    
    async def increment(self, link_id: int) -> int:
        try:
            score = await self.redis.zincrby(self.key, 1, str(link_id))
        except RedisError as e:
            raise StoreUnavailable(f"Redis ZINCRBY on {self.key!r} failed: {e}") from e
        return int(score)
    
    async def top_n(self, n: int) -> List[ClickScore]:
        if n <= 0:
            return []
        
        try:
            rows = await self.redis.zrevrange(self.key, 0, n - 1, withscores=True)
        except RedisError as e:
            raise StoreUnavailable(f"Redis ZREVRANGE on {self.key!r} failed: {e}") from e
        
        return [ClickScore(link_id=int(member), score=int(score)) for member, score in rows]
    
    async def get_score(self, link_id: int) -> int:
        try:
            score = await self.redis.zscore(self.key, str(link_id))
        except RedisError as e:
            raise StoreUnavailable(f"Redis ZSCORE on {self.key!r} failed: {e}") from e
        return int(score) if score is not None else 0
    
    async def close(self) -> None:
        await self.redis.aclose()


class InMemoryClickCounter(ClickCounterStrategy):
    """
    In-memory counter using a dict guarded by a lock.
    
    Pros:
    - No external dependencies
    - Good for development and testing
    
    Cons:
    - Not shared between processes
    - Lost on restart
    
    The lock is a threading.Lock so increments stay atomic even when
    called from several threads (each with its own event loop).
    Ties in top_n are broken by link id ascending.
    """
    
    def __init__(self):
        """Initialize empty score table"""
        self._scores: Dict[int, int] = {}
        self._lock = threading.Lock()
    
    async def increment(self, link_id: int) -> int:
        with self._lock:
            score = self._scores.get(link_id, 0) + 1
            self._scores[link_id] = score
        return score
    
    async def top_n(self, n: int) -> List[ClickScore]:
        if n <= 0:
            return []
        
        # Snapshot under the lock, sort outside it
        with self._lock:
            snapshot = list(self._scores.items())
        
        ranked = sorted(snapshot, key=lambda item: (-item[1], item[0]))
        return [ClickScore(link_id=link_id, score=score) for link_id, score in ranked[:n]]
    
    async def get_score(self, link_id: int) -> int:
        with self._lock:
            return self._scores.get(link_id, 0)
