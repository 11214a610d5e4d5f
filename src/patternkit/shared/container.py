"""Process-scoped container for patternkit.

Holds the long-lived objects of a run (configuration, the singleton guard,
the strategy router) so they are created once at startup and passed
explicitly to the code that needs them, instead of living in module globals.
"""

import inspect
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

from patternkit.core.config import Config
from patternkit.singleton.guard import SingletonGuard
from patternkit.strategies.routing import StrategyRouter, create_default_router

T = TypeVar("T")


class DIContainer:
    """Dependency container with lazily created, shared instances.

    Features:
    - Factory-based dependency registration
    - Configuration resolvable by its type
    - Lazy initialization (factory runs on first ``get``)
    - Factories run at most once, even under concurrent first access
    """

    def __init__(self, config: Any | None = None) -> None:
        self._singletons: dict[type, Any] = {}
        self._factories: dict[type, Callable] = {}
        self._instances: dict[type, Any] = {}
        self._lock = threading.Lock()

        if config is not None:
            self._singletons[type(config)] = config

    def register_factory(
        self, factory: Callable[["DIContainer"], T]
    ) -> type[T]:
        """Register a factory function for a dependency.

        Args:
            factory: A callable that takes the container and returns an instance.

        Returns:
            The return type annotation of the factory.
        """
        return_type = inspect.signature(factory).return_annotation
        self._factories[return_type] = factory  # type: ignore[assignment]
        return return_type  # type: ignore[return-value]

    def get(self, cls: type[T]) -> T:
        """Resolve a dependency by type.

        Args:
            cls: The type to resolve.

        Returns:
            An instance of the requested type.

        Raises:
            ValueError: If the dependency cannot be resolved.
        """
        if cls in self._singletons:
            return self._singletons[cls]

        instance = self._instances.get(cls)
        if instance is not None:
            return instance

        if cls in self._factories:
            with self._lock:
                # Another thread may have built it while we waited
                if cls not in self._instances:
                    logger.debug(f"Creating {cls.__name__} from factory")
                    self._instances[cls] = self._factories[cls](self)
                return self._instances[cls]

        raise ValueError(f"Cannot resolve dependency: {cls.__name__}")


def create_container(config: Config | None = None) -> DIContainer:
    """Create a container wired with the patternkit services.

    Initialization order: the configuration is registered first, then the
    singleton guard and the strategy router are registered as factories and
    built on first ``get``.

    Args:
        config: Optional configuration object. Defaults to ``Config.from_env()``.

    Returns:
        A configured DIContainer instance.
    """
    if config is None:
        config = Config.from_env()

    container = DIContainer(config)

    def guard_factory(c: DIContainer) -> SingletonGuard:
        return SingletonGuard(c.get(Config).log_file)

    def router_factory(c: DIContainer) -> StrategyRouter:
        return create_default_router()

    container.register_factory(guard_factory)
    container.register_factory(router_factory)
    return container
