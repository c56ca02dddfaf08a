"""
Infrastructure Layer - External system integrations.

This layer contains implementations of interfaces defined in the interfaces/ layer.
Each subdirectory groups implementations by external dependency.

Structure:
- redis/  - Redis connection management and key-value store
"""

from .redis import RedisConnectionManager, RedisKeyValueStore, get_redis_store

__all__ = [
    "RedisConnectionManager",
    "RedisKeyValueStore",
    "get_redis_store",
]
