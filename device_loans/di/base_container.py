# Standard library imports
import threading
from typing import Any, Callable, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self.lazy_factories: Dict[Union[Type, str], Callable] = {}
        # Reentrant: a lazy factory may resolve its own dependencies
        self._lock = threading.RLock()

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def register_lazy_singleton(
        self,
        interface: Union[Type[TypeVarType], str],
        factory: Callable[[], TypeVarType],
    ) -> None:
        """
        Register a singleton built on first lookup.

        Construction runs at most once even under concurrent first
        lookups. If the factory raises, nothing is cached and the next
        lookup tries again.
        """
        self.lazy_factories[interface] = factory

    def is_initialized(self, interface: Union[Type, str]) -> bool:
        return interface in self.instances

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]

        if interface in self.lazy_factories:
            with self._lock:
                if interface not in self.instances:
                    self.instances[interface] = self.lazy_factories[interface]()
                return self.instances[interface]

        raise ValueError(f"No registration found for {interface}")
