"""
Factory for creating click counter instances.
"""

import logging
from enum import Enum

import redis.asyncio as redis
from redis.exceptions import RedisError

from shortlink_app.config import Settings
from .strategies import ClickCounterStrategy, RedisClickCounter, InMemoryClickCounter

logger = logging.getLogger(__name__)


class CounterBackend(Enum):
    """Available counter backends"""
    REDIS = "redis"
    MEMORY = "memory"


class ClickCounterFactory:
    """
    Simple factory for creating click counter instances.
    
    Called once at application startup; the result is stored on
    app.state and shared by every request.
    """
    
    @classmethod
    async def create(cls, backend: CounterBackend, settings: Settings) -> ClickCounterStrategy:
        """
        Create a counter for the given backend.
        
        If Redis cannot be reached, falls back to the in-memory counter
        so redirects keep working (clicks are then per-process only).
        
        Args:
            backend: Type of counter backend (from enum)
            settings: Connection settings
            
        Returns:
            ClickCounterStrategy instance
        """
        if backend == CounterBackend.REDIS:
            redis_client = redis.from_url(
                settings.redis_url,
                decode_responses=True,
                socket_connect_timeout=settings.redis_timeout,
                socket_timeout=settings.redis_timeout,
            )
            
            try:
                # Test connection immediately
                await redis_client.ping()
            except RedisError as e:
                logger.warning("Redis connection failed (%s), falling back to in-memory counter", e)
                await redis_client.aclose()
                return InMemoryClickCounter()
            
            logger.info("Redis click counter initialized (key=%s)", settings.counter_key)
            return RedisClickCounter(redis_client, key=settings.counter_key)
        
        if backend == CounterBackend.MEMORY:
            logger.info("In-memory click counter initialized")
            return InMemoryClickCounter()
        
        raise ValueError(f"Unknown counter backend: {backend}")
