"""
Key-Value Facade - module-level key and hash operations.

    from services import key_value as kv

    kv.set("session:42", "alice", ttl=60)
    kv.get("session:42")          # "alice", or None once expired
    kv.hset("user:42", "name", "alice")

Each call resolves the IKeyValueStore from the container; the first one
opens the shared Redis connection. Errors from the store propagate unchanged.
"""

from typing import Any, Optional

from core.container import get_key_value_store
from infrastructure.redis.client import get_connection_manager


def set(key: str, value: Any, ttl: Optional[int] = None) -> bool:
    """Store value under key, expiring after ttl seconds when ttl is given."""
    return get_key_value_store().set(key, value, ttl)


def get(key: str) -> Optional[str]:
    """Return the value under key, or None if it does not exist."""
    return get_key_value_store().get(key)


def delete(key: str) -> int:
    return get_key_value_store().delete(key)


def exists(key: str) -> bool:
    return get_key_value_store().exists(key)


def expire(key: str, ttl: int) -> bool:
    """Set the TTL of key in seconds. False if key does not exist."""
    return get_key_value_store().expire(key, ttl)


def hset(name: str, field: str, value: Any) -> int:
    """Set field in hash name. 1 if the field is new, 0 if it was updated."""
    return get_key_value_store().hset(name, field, value)


def hget(name: str, field: str) -> Optional[str]:
    return get_key_value_store().hget(name, field)


def hdel(name: str, field: str) -> int:
    return get_key_value_store().hdel(name, field)


def ping() -> bool:
    """Health probe. Never raises; False when Redis is unreachable."""
    return get_connection_manager().ping()


def close() -> None:
    """Close the shared connection (call on shutdown)."""
    get_connection_manager().close()


__all__ = [
    "set",
    "get",
    "delete",
    "exists",
    "expire",
    "hset",
    "hget",
    "hdel",
    "ping",
    "close",
]
