"""
Database models for the link registry.

Note: Click counts are NOT stored here. They live in the click counter store
(Redis sorted set or in-memory map), keyed by ShortLink.id.
"""

from .link import ShortLink

__all__ = ["ShortLink"]
