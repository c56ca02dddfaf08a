"""
Redis implementation of IKeyValueStore.

Every operation makes sure the managed connection exists, then forwards to
the matching Redis command. Return values are normalized to plain Python
types; store errors (e.g. WRONGTYPE) are not caught.
"""

from typing import Any, Optional

from redis import Redis

from core.logger import logger
from core.messages import LogMessages
from infrastructure.redis.client import RedisConnectionManager, get_connection_manager
from interfaces.key_value_store import IKeyValueStore


class RedisKeyValueStore(IKeyValueStore):
    """Key and hash operations over a RedisConnectionManager."""

    def __init__(self, connection_manager: Optional[RedisConnectionManager] = None):
        self.connection_manager = connection_manager or get_connection_manager()

    def _client(self, command: str, key: str) -> Redis:
        client = self.connection_manager.ensure_connected()
        logger.debug(LogMessages.COMMAND.format(command=command, key=key))
        return client

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        # ttl of 0/None means no expiry
        if ttl:
            return bool(self._client("SETEX", key).setex(key, ttl, value))
        return bool(self._client("SET", key).set(key, value))

    def get(self, key: str) -> Optional[str]:
        return self._client("GET", key).get(key)

    def delete(self, key: str) -> int:
        return int(self._client("DEL", key).delete(key))

    def exists(self, key: str) -> bool:
        return bool(self._client("EXISTS", key).exists(key))

    def expire(self, key: str, ttl: int) -> bool:
        return bool(self._client("EXPIRE", key).expire(key, ttl))

    def hset(self, name: str, field: str, value: Any) -> int:
        return int(self._client("HSET", name).hset(name, field, value))

    def hget(self, name: str, field: str) -> Optional[str]:
        return self._client("HGET", name).hget(name, field)

    def hdel(self, name: str, field: str) -> int:
        return int(self._client("HDEL", name).hdel(name, field))


# Global singleton
_redis_store: Optional[RedisKeyValueStore] = None


def get_redis_store() -> RedisKeyValueStore:
    """Get or create RedisKeyValueStore singleton."""
    global _redis_store
    if _redis_store is None:
        _redis_store = RedisKeyValueStore()
    return _redis_store


def reset_redis_store() -> None:
    """Forget the store singleton (useful for testing)."""
    global _redis_store
    _redis_store = None
