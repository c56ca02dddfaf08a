"""Centralized error and log message templates for Redis access."""


class ErrorMessages:
    """Centralized error message templates."""

    # Connection errors
    CONNECTION_FAILED = "Redis connection failed ({address}): {error}"
    CONNECTION_TIMEOUT = "Redis connection timed out ({address}): {error}"
    AUTHENTICATION_FAILED = "Redis authentication rejected ({address}): {error}"

    # Health
    PING_FAILED = "Redis ping failed: {error}"

    # Container
    NO_PROVIDER = "No provider registered for {name}"


class LogMessages:
    """Centralized log message templates."""

    CONNECTING = "Connecting to Redis at {address} (db={db}, auth={auth})"
    CONNECTED = "Redis client created: {address}"
    CONNECTION_CLOSED = "Redis connection closed"
    COMMAND = "Redis {command} {key}"
