"""
Click counter module for the leaderboard.
Implements Strategy Pattern for flexible counter backends.
"""

from .models import ClickScore
from .strategies import ClickCounterStrategy, RedisClickCounter, InMemoryClickCounter
from .factory import ClickCounterFactory, CounterBackend

__all__ = [
    "ClickScore",
    "ClickCounterStrategy",
    "RedisClickCounter",
    "InMemoryClickCounter",
    "ClickCounterFactory",
    "CounterBackend",
]
