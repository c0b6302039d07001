# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.

    Dependencies are keyed by type (interfaces, use case classes) or by
    name (e.g. "user_collection"). Singletons are stored as instances;
    factories build a fresh instance on every get().
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """
        Register a shared instance

        Args:
            key: Type or name the instance is resolved by
            instance: Instance returned on every get()
        """
        self._factories.pop(key, None)
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """
        Register a factory called on every get()

        Args:
            key: Type or name the factory is resolved by
            factory: Zero-argument callable producing the dependency
        """
        self._singletons.pop(key, None)
        self._factories[key] = factory

    def has(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories

    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency

        Args:
            key: Type or name to resolve

        Returns:
            Registered singleton or a new instance from the factory

        Raises:
            KeyError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise KeyError(f"No dependency registered for {name}")
