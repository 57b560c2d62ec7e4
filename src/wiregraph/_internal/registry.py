from __future__ import annotations

import logging
import threading
from typing import Any

from wiregraph._internal.type_checks import is_platform_class
from wiregraph.binding_key import BindingKey

logger = logging.getLogger(__name__)

MISSING: Any = object()
"""Sentinel returned by ``BindingRegistry.find_singleton`` on a cache miss."""


class BindingRegistry:
    """Store bindings, capability mappings and materialized singletons.

    Registry keys are unique: writing an existing key replaces the previous
    entry (last write wins). Writes are serialized by an internal lock; reads
    are lock-free and expect registration to finish before concurrent
    resolution starts.
    """

    def __init__(self) -> None:
        self._bindings: dict[BindingKey, type[Any]] = {}
        self._capabilities: dict[BindingKey, type[Any]] = {}
        self._singletons: dict[BindingKey, Any] = {}
        self._lock = threading.Lock()

    def add_type(self, implementation: type[Any], name: str) -> None:
        """Bind ``(implementation, name)`` to the implementation itself.

        Args:
            implementation: Concrete class to construct on resolution.
            name: Binding name.

        """
        key = BindingKey(implementation, name)
        with self._lock:
            if key in self._bindings:
                logger.debug("Overwriting binding %s", key)
            self._bindings[key] = implementation
            self._add_capabilities(implementation, name)
        logger.debug("Registered type %s", key)

    def add_instance(self, instance: Any, name: str) -> None:
        """Store ``instance`` as the singleton of ``(type(instance), name)``.

        Args:
            instance: Pre-built value returned by every later resolution.
            name: Binding name.

        """
        implementation = type(instance)
        key = BindingKey(implementation, name)
        with self._lock:
            if key in self._singletons:
                logger.debug("Overwriting singleton %s", key)
            self._singletons[key] = instance
            self._add_capabilities(implementation, name)
        logger.debug("Registered instance %s", key)

    def find_implementation(self, key: BindingKey) -> type[Any] | None:
        """Return the implementation bound to ``key``, or mapped to it as a capability.

        Args:
            key: Requested binding key.

        """
        implementation = self._bindings.get(key)
        if implementation is not None:
            return implementation
        return self._capabilities.get(key)

    def find_singleton(self, key: BindingKey) -> Any:
        """Return the cached instance of ``key`` or ``MISSING``.

        Args:
            key: Binding key to look up.

        """
        return self._singletons.get(key, MISSING)

    def publish_singleton(self, key: BindingKey, instance: Any) -> None:
        """Cache a materialized instance under ``key``.

        Args:
            key: Binding key the instance is cached under.
            instance: Materialized instance.

        """
        with self._lock:
            self._singletons[key] = instance

    def contains(self, key: BindingKey) -> bool:
        """Return true when ``key`` has a binding, a capability mapping or a singleton.

        Args:
            key: Binding key to check.

        """
        return key in self._bindings or key in self._capabilities or key in self._singletons

    def capabilities_of(self, implementation: type[Any]) -> list[type[Any]]:
        """Return the capability classes an implementation is mapped under.

        These are the classes of its MRO except itself and classes provided by
        the Python runtime or its standard library.

        Args:
            implementation: Concrete class being registered.

        """
        return [
            capability
            for capability in implementation.__mro__[1:]
            if not is_platform_class(capability)
        ]

    def _add_capabilities(self, implementation: type[Any], name: str) -> None:
        for capability in self.capabilities_of(implementation):
            capability_key = BindingKey(capability, name)
            previous = self._capabilities.get(capability_key)
            if previous is not None and previous is not implementation:
                logger.debug(
                    "Capability %s remapped from %s to %s",
                    capability_key,
                    previous.__qualname__,
                    implementation.__qualname__,
                )
            self._capabilities[capability_key] = implementation


__all__ = ["MISSING", "BindingRegistry"]
