"""
Dependency Injection Container.

Maps interfaces to the implementations the facade forwards to.
"""

from typing import Any, Callable, Dict, Type, TypeVar

from core.logger import logger
from core.messages import ErrorMessages

T = TypeVar("T")


class Container:
    """
    Simple Dependency Injection Container.

    Supports:
    - Singleton instances (register)
    - Factory functions (register_factory)
    - Interface resolution (resolve)
    """

    _instances: Dict[Type, Any] = {}
    _providers: Dict[Type, Callable[[], Any]] = {}
    _initialized: bool = False

    @classmethod
    def register(cls, interface: Type[T], instance: Any) -> None:
        """Register a singleton instance for an interface."""
        cls._instances[interface] = instance

    @classmethod
    def register_factory(cls, interface: Type[T], factory: Callable[[], T]) -> None:
        """
        Register a factory function for an interface.
        Factory is called each time resolve() is called.
        """
        cls._providers[interface] = factory

    @classmethod
    def resolve(cls, interface: Type[T]) -> T:
        """
        Resolve an interface to its implementation.

        Raises:
            KeyError: If no implementation is registered for the interface
        """
        if interface in cls._instances:
            return cls._instances[interface]
        if interface in cls._providers:
            return cls._providers[interface]()
        raise KeyError(ErrorMessages.NO_PROVIDER.format(name=interface.__name__))

    @classmethod
    def is_registered(cls, interface: Type[T]) -> bool:
        return interface in cls._instances or interface in cls._providers

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (useful for testing)."""
        cls._instances.clear()
        cls._providers.clear()
        cls._initialized = False

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def _mark_initialized(cls) -> None:
        cls._initialized = True


def bootstrap_container() -> None:
    """
    Initialize the dependency injection container.

    Registers IKeyValueStore -> RedisKeyValueStore (singleton via factory).
    Idempotent. Registering does not open a connection; that happens on the
    first store operation.
    """
    if Container.is_initialized():
        return

    from interfaces.key_value_store import IKeyValueStore
    from infrastructure.redis.store import get_redis_store

    Container.register_factory(IKeyValueStore, get_redis_store)
    logger.debug("Registered IKeyValueStore -> RedisKeyValueStore (factory)")

    Container._mark_initialized()


def get_key_value_store():
    """
    Get IKeyValueStore implementation from container.

    Returns:
        IKeyValueStore implementation
    """
    from interfaces.key_value_store import IKeyValueStore

    if not Container.is_initialized():
        bootstrap_container()

    return Container.resolve(IKeyValueStore)
