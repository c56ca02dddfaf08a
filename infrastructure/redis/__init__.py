"""Redis infrastructure module."""

from redis.exceptions import AuthenticationError
from redis.exceptions import ConnectionError as RedisConnectionError

from infrastructure.redis.client import (
    RedisConnectionManager,
    get_connection_manager,
    get_redis_client,
    reset_connection_manager,
)
from infrastructure.redis.store import (
    RedisKeyValueStore,
    get_redis_store,
    reset_redis_store,
)

__all__ = [
    "RedisConnectionManager",
    "get_connection_manager",
    "get_redis_client",
    "reset_connection_manager",
    "RedisKeyValueStore",
    "get_redis_store",
    "reset_redis_store",
    "AuthenticationError",
    "RedisConnectionError",
]
