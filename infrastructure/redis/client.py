"""
Redis connection management.

Owns the single process-wide Redis handle. The handle is created lazily on
first use from settings in core.config and bound to one network connection
(single_connection_client). Nothing here retries or reconnects: connection
and authentication errors propagate to whichever call triggered the connect.
"""

import threading
from typing import Optional

from redis import Redis
from redis.exceptions import AuthenticationError
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from core.config import Settings, get_settings
from core.constants import REDIS_DECODE_RESPONSES, REDIS_ENCODING
from core.logger import format_exception_short, logger
from core.messages import ErrorMessages, LogMessages


class RedisConnectionManager:
    """
    Lazily-created, initialize-once Redis handle.

    The first call to ensure_connected() opens the connection, authenticates
    when a password is configured and verifies it with PING. Later calls
    return the same handle. Creation is guarded by a lock so concurrent
    first use still yields exactly one handle.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Args:
            settings: Settings to connect with (defaults to get_settings())
        """
        self._settings = settings
        self._client: Optional[Redis] = None
        self._lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def is_connected(self) -> bool:
        """True once a handle has been created (and not closed)."""
        return self._client is not None

    def ensure_connected(self) -> Redis:
        """
        Get or create the Redis handle.

        Returns:
            The ready-to-use Redis client

        Raises:
            AuthenticationError: If the configured password is rejected
            redis.exceptions.ConnectionError: If the server cannot be reached
        """
        client = self._client
        if client is not None:
            return client

        with self._lock:
            if self._client is None:
                self._client = self._connect()
            return self._client

    def _connect(self) -> Redis:
        settings = self.settings
        address = settings.redis_address
        logger.info(
            LogMessages.CONNECTING.format(
                address=address,
                db=settings.redis_db,
                auth=settings.redis_password is not None,
            )
        )

        client = None
        try:
            client = Redis(
                host=settings.redis_host,
                port=settings.redis_port,
                db=settings.redis_db,
                password=settings.redis_password,
                encoding=REDIS_ENCODING,
                decode_responses=REDIS_DECODE_RESPONSES,
                socket_connect_timeout=settings.redis_socket_connect_timeout,
                socket_timeout=settings.redis_socket_timeout,
                single_connection_client=True,
            )
            client.ping()
        # AuthenticationError subclasses ConnectionError, so it goes first
        except AuthenticationError as e:
            logger.error(
                ErrorMessages.AUTHENTICATION_FAILED.format(
                    address=address, error=format_exception_short(e)
                )
            )
            self._discard(client)
            raise
        except RedisConnectionError as e:
            logger.error(
                ErrorMessages.CONNECTION_FAILED.format(
                    address=address, error=format_exception_short(e)
                )
            )
            self._discard(client)
            raise
        # redis-py raises TimeoutError (not a ConnectionError) when the connect
        # or the PING reply times out
        except RedisTimeoutError as e:
            logger.error(
                ErrorMessages.CONNECTION_TIMEOUT.format(
                    address=address, error=format_exception_short(e)
                )
            )
            self._discard(client)
            raise RedisConnectionError(
                ErrorMessages.CONNECTION_TIMEOUT.format(address=address, error=e)
            ) from e

        logger.info(LogMessages.CONNECTED.format(address=address))
        return client

    @staticmethod
    def _discard(client: Optional[Redis]) -> None:
        if client is None:
            return
        try:
            client.close()
        except RedisError as e:
            logger.debug(f"Ignoring error while discarding client: {e}")

    def ping(self) -> bool:
        """
        Check Redis connection health.

        Returns:
            True if Redis is reachable, False otherwise
        """
        try:
            return bool(self.ensure_connected().ping())
        except RedisError as e:
            logger.error(ErrorMessages.PING_FAILED.format(error=e))
            return False

    def close(self) -> None:
        """Close the handle. The next ensure_connected() connects again."""
        with self._lock:
            if self._client is not None:
                try:
                    self._client.close()
                finally:
                    self._client = None
                logger.info(LogMessages.CONNECTION_CLOSED)


# Global singleton
_connection_manager: Optional[RedisConnectionManager] = None
_manager_lock = threading.Lock()


def get_connection_manager() -> RedisConnectionManager:
    """Get or create the process-wide RedisConnectionManager."""
    global _connection_manager
    if _connection_manager is None:
        with _manager_lock:
            if _connection_manager is None:
                logger.debug("Creating RedisConnectionManager instance...")
                _connection_manager = RedisConnectionManager()
    return _connection_manager


def get_redis_client() -> Redis:
    """Shortcut for get_connection_manager().ensure_connected()."""
    return get_connection_manager().ensure_connected()


def reset_connection_manager() -> None:
    """Close and forget the global manager (useful for testing)."""
    global _connection_manager
    with _manager_lock:
        if _connection_manager is not None:
            _connection_manager.close()
        _connection_manager = None
