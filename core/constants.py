"""Constants for the Redis facade."""


# =============================================================================
# Redis Connection Defaults
# =============================================================================

DEFAULT_REDIS_HOST = "127.0.0.1"
DEFAULT_REDIS_PORT = 6379
DEFAULT_REDIS_DB = 0

# Timeout configuration (in seconds)
DEFAULT_SOCKET_CONNECT_TIMEOUT = 5.0  # Time to establish connection
DEFAULT_SOCKET_TIMEOUT = 5.0  # Time to wait for a reply

# Responses are decoded to str so callers get back what they stored
REDIS_DECODE_RESPONSES = True
REDIS_ENCODING = "utf-8"


# =============================================================================
# Logging
# =============================================================================

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
