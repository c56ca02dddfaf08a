"""
Shared fixtures.

Every test starts with a clean environment: no Redis env vars, fresh settings
cache, empty DI container and no global connection manager. The
`redis_factory` fixture replaces redis.Redis with fakeredis clients sharing
one in-memory server and records every constructor call, so tests can count
how many connections were opened.
"""

from unittest.mock import patch

import fakeredis
import pytest

from core.config import get_settings
from core.container import Container
from infrastructure.redis.client import reset_connection_manager
from infrastructure.redis.store import reset_redis_store

REDIS_ENV_VARS = (
    "REDIS_HOST",
    "REDIS_PORT",
    "REDIS_PASSWORD",
    "REDIS_DB",
    "redis.host",
    "redis.port",
    "redis.password",
)


def _reset_globals():
    get_settings.cache_clear()
    Container.clear()
    reset_connection_manager()
    reset_redis_store()


@pytest.fixture(autouse=True)
def clean_state(monkeypatch, tmp_path):
    for name in REDIS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    _reset_globals()
    yield
    _reset_globals()


class FakeRedisFactory:
    """Stands in for the redis.Redis constructor."""

    def __init__(self, requirepass: str = None):
        config = {b"requirepass": requirepass.encode()} if requirepass else None
        self.server = fakeredis.FakeServer(config=config)
        self.calls = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        # password is forwarded so AUTH runs against the fake server
        return fakeredis.FakeRedis(
            server=self.server,
            password=kwargs.get("password"),
            decode_responses=True,
        )

    @property
    def connection_count(self) -> int:
        return len(self.calls)

    def raw_client(self):
        """A client on the same server that does not count as a connection."""
        return fakeredis.FakeRedis(server=self.server, decode_responses=True)


@pytest.fixture
def redis_factory():
    factory = FakeRedisFactory()
    with patch("infrastructure.redis.client.Redis", new=factory):
        yield factory


@pytest.fixture
def secured_redis_factory():
    """Like redis_factory, but the fake server requires the password "s3cret"."""
    factory = FakeRedisFactory(requirepass="s3cret")
    with patch("infrastructure.redis.client.Redis", new=factory):
        yield factory
