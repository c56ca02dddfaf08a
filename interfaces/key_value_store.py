"""
Key-Value Store Interface - Abstract interface for key and hash operations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IKeyValueStore(ABC):
    """
    Abstract interface for a key-value store with native hashes.

    Implementations:
    - infrastructure.redis.store.RedisKeyValueStore
    """

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Store a value under key.

        Args:
            key: Key to write
            value: Value to store
            ttl: Time-to-live in seconds (optional)

        Returns:
            True if the value was stored
        """
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value under key, or None if the key is absent."""
        pass

    @abstractmethod
    def delete(self, key: str) -> int:
        """Delete key. Returns the number of keys removed."""
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    def expire(self, key: str, ttl: int) -> bool:
        """Set a TTL on key. Returns False if the key does not exist."""
        pass

    @abstractmethod
    def hset(self, name: str, field: str, value: Any) -> int:
        """
        Set a field within a hash.

        Returns:
            1 if the field was created, 0 if an existing field was updated
        """
        pass

    @abstractmethod
    def hget(self, name: str, field: str) -> Optional[str]:
        pass

    @abstractmethod
    def hdel(self, name: str, field: str) -> int:
        """Delete a field from a hash. Returns the number of fields removed."""
        pass
