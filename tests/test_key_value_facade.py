"""
Tests for the module-level key-value facade.

Exercises the full path: facade -> container -> RedisKeyValueStore ->
global RedisConnectionManager, with redis.Redis replaced by fakeredis.
"""

import time
from unittest.mock import patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from services import key_value as kv


class TestFacadeOperations:
    """Behavior observed through the facade."""

    def test_set_then_get(self, redis_factory):
        """Test that set() then get() returns the value."""
        assert kv.set("k", "v") is True
        assert kv.get("k") == "v"

    def test_ttl_expires_key(self, redis_factory):
        """Test that a key set with ttl=1 is gone after a second."""
        kv.set("short", "lived", ttl=1)
        assert kv.get("short") == "lived"

        time.sleep(1.2)

        assert kv.get("short") is None
        assert kv.exists("short") is False

    def test_delete_and_exists(self, redis_factory):
        """Test delete() counts and exists() afterwards."""
        assert kv.delete("k") == 0

        kv.set("k", "v")
        assert kv.delete("k") == 1
        assert kv.exists("k") is False

    def test_expire(self, redis_factory):
        """Test expire() on absent and present keys."""
        assert kv.expire("k", 5) is False
        kv.set("k", "v")
        assert kv.expire("k", 5) is True

    def test_hash_update_reports_zero(self, redis_factory):
        """Test that updating a hash field returns 0 and keeps the new value."""
        assert kv.hset("h", "f", "v1") == 1
        assert kv.hset("h", "f", "v2") == 0
        assert kv.hget("h", "f") == "v2"
        assert kv.hdel("h", "f") == 1

    def test_ping(self, redis_factory):
        """Test that ping() is True against a live store."""
        assert kv.ping() is True


class TestFacadeConnection:
    """Connection lifecycle through the facade."""

    def test_one_connection_for_all_operations(self, redis_factory):
        """Test that many facade calls share one connection."""
        for i in range(20):
            kv.set(f"key:{i}", str(i))
            kv.get(f"key:{i}")
            kv.hset("hash", f"field:{i}", str(i))

        assert redis_factory.connection_count == 1

    def test_unconfigured_connects_to_default_address(self, redis_factory):
        """Test that no configuration means 127.0.0.1:6379 without AUTH."""
        kv.get("anything")

        kwargs = redis_factory.calls[0]
        assert (kwargs["host"], kwargs["port"]) == ("127.0.0.1", 6379)
        assert kwargs["password"] is None

    def test_close_then_reconnect(self, redis_factory):
        """Test that close() is followed by a lazy reconnect."""
        kv.set("k", "v")
        kv.close()

        assert kv.get("k") == "v"
        assert redis_factory.connection_count == 2

    def test_connection_error_reaches_caller(self):
        """Test that a connection failure propagates from the operation."""
        with patch(
            "infrastructure.redis.client.Redis",
            side_effect=RedisConnectionError("refused"),
        ):
            with pytest.raises(RedisConnectionError):
                kv.set("k", "v")

    def test_ping_false_when_unreachable(self):
        """Test that ping() returns False when Redis is unreachable."""
        with patch(
            "infrastructure.redis.client.Redis",
            side_effect=RedisConnectionError("refused"),
        ):
            assert kv.ping() is False
