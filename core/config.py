"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore

from core.constants import (
    DEFAULT_REDIS_DB,
    DEFAULT_REDIS_HOST,
    DEFAULT_REDIS_PORT,
    DEFAULT_SOCKET_CONNECT_TIMEOUT,
    DEFAULT_SOCKET_TIMEOUT,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Redis Facade", alias="APP_NAME")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # Redis connection
    # Each key also accepts its dotted name (redis.host, redis.port, redis.password)
    redis_host: str = Field(
        default=DEFAULT_REDIS_HOST,
        validation_alias=AliasChoices("REDIS_HOST", "redis.host"),
    )
    redis_port: int = Field(
        default=DEFAULT_REDIS_PORT,
        validation_alias=AliasChoices("REDIS_PORT", "redis.port"),
    )
    redis_password: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("REDIS_PASSWORD", "redis.password"),
    )
    redis_db: int = Field(default=DEFAULT_REDIS_DB, alias="REDIS_DB")
    redis_socket_timeout: float = Field(
        default=DEFAULT_SOCKET_TIMEOUT, alias="REDIS_SOCKET_TIMEOUT"
    )  # seconds
    redis_socket_connect_timeout: float = Field(
        default=DEFAULT_SOCKET_CONNECT_TIMEOUT, alias="REDIS_SOCKET_CONNECT_TIMEOUT"
    )  # seconds

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Log format: "console" (colored, human-readable) or "json" (for log aggregation)
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    # Enable/disable file logging (logs/app.log and logs/error.log)
    log_file_enabled: bool = Field(default=False, alias="LOG_FILE_ENABLED")

    @field_validator("redis_password", mode="before")
    @classmethod
    def empty_password_is_none(cls, value):
        """An empty password means no AUTH step."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    @property
    def redis_address(self) -> str:
        return f"{self.redis_host}:{self.redis_port}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
