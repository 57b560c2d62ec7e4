from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from typing import Any, TypeVar

from wiregraph._internal.initializers import InitializerExtractor
from wiregraph._internal.materializer import DependencyMaterializer
from wiregraph._internal.registry import MISSING, BindingRegistry
from wiregraph._internal.resolution_context import ResolutionContext
from wiregraph._internal.selector import InitializerSelector
from wiregraph._internal.type_checks import is_runtime_class
from wiregraph.binding_key import DEFAULT_NAME, BindingKey
from wiregraph.exceptions import WiregraphInvalidArgumentError, WiregraphNoBindingFoundError
from wiregraph.lock_mode import LockMode

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Container:
    """Register components and resolve them into container-lifetime singletons.

    Every registration is keyed by ``(type, name)``. ``register_type`` binds a
    class to itself and ``register_instance`` stores a ready-made value. Both
    also map every non-builtin base class of the registered type to it under the
    same name, so components can be resolved by an abstraction.

    Resolution is lazy: nothing is validated until ``resolve`` is called. The
    first resolution of a key picks an initializer, resolves its parameters
    recursively (by parameter name, falling back to the default name), builds
    the instance and caches it; every later resolution returns the same object.

    Registration is meant to run as a composition phase before concurrent
    resolution starts. Resolution itself is safe to call from many threads.
    """

    def __init__(self, *, lock_mode: LockMode = LockMode.THREAD) -> None:
        """Initialize an empty container.

        Args:
            lock_mode: Singleton construction discipline. ``LockMode.THREAD``
                guarantees a single construction per key under concurrent
                resolution; ``LockMode.NONE`` skips locking for single-threaded
                use.

        Examples:
            .. code-block:: python

                container = Container()
                container.register_instance(settings, name="config")
                container.register_type(Server)
                server = container.resolve(Server)

        """
        self._lock_mode = lock_mode
        self._registry = BindingRegistry()
        self._initializer_extractor = InitializerExtractor()
        self._initializer_selector = InitializerSelector(
            self._registry,
            self._initializer_extractor,
        )
        self._dependency_materializer = DependencyMaterializer(
            self._initializer_selector,
            self._resolve_key,
        )
        self._singleton_locks: dict[BindingKey, threading.RLock] = {}
        self._singleton_locks_lock = threading.Lock()

    # region Registration Methods
    def register_type(self, implementation: type[Any], name: str = DEFAULT_NAME) -> None:
        """Register a class to be constructed on first resolution.

        Re-registering the same ``(implementation, name)`` key silently replaces
        the previous binding. Instances that were already resolved stay cached.

        Args:
            implementation: Concrete class; it is its own implementation.
            name: Binding name.

        Raises:
            WiregraphInvalidArgumentError: If ``implementation`` is not a class or
                ``name`` is empty.

        """
        self._validate_type(implementation)
        self._registry.add_type(implementation, name)

    def register_instance(self, instance: Any, name: str = DEFAULT_NAME) -> None:
        """Register a pre-built instance under ``(type(instance), name)``.

        Resolving that key, or any capability of ``type(instance)`` under the
        same name, returns ``instance`` itself without construction.

        Args:
            instance: Value to return on resolution.
            name: Binding name.

        Raises:
            WiregraphInvalidArgumentError: If ``instance`` is ``None`` or ``name``
                is empty.

        """
        if instance is None:
            msg = "Instance cannot be None."
            raise WiregraphInvalidArgumentError(msg)
        self._registry.add_instance(instance, name)

    # endregion Registration Methods

    # region Resolution Methods
    def resolve(self, dependency: type[T], name: str = DEFAULT_NAME) -> T:
        """Resolve the singleton bound to ``(dependency, name)``.

        Args:
            dependency: Requested class, either registered directly or a base
                class of a registered implementation.
            name: Binding name.

        Raises:
            WiregraphInvalidArgumentError: If ``dependency`` is not a class or
                ``name`` is empty.
            WiregraphNoBindingFoundError: If nothing is registered for the key.
            WiregraphNoSuitableInitializerError: If no initializer of the
                implementation has all of its parameters registered.
            WiregraphCyclicDependencyError: If the key depends on itself.
            WiregraphConstructionError: If a nested dependency fails or an
                initializer raises.

        """
        self._validate_type(dependency)
        key = BindingKey(dependency, name)
        return self._resolve_key(key, ResolutionContext())

    def is_registered(self, dependency: type[Any], name: str = DEFAULT_NAME) -> bool:
        """Return true when ``(dependency, name)`` has a binding, capability or instance.

        Args:
            dependency: Class to check.
            name: Binding name.

        """
        self._validate_type(dependency)
        return self._registry.contains(BindingKey(dependency, name))

    def __contains__(self, key: object) -> bool:
        if isinstance(key, BindingKey):
            return self._registry.contains(key)
        return is_runtime_class(key) and self._registry.contains(BindingKey.default_for(key))

    # endregion Resolution Methods

    def _resolve_key(self, key: BindingKey, context: ResolutionContext) -> Any:
        with context.acquire(key):
            cached = self._registry.find_singleton(key)
            if cached is not MISSING:
                logger.debug("Singleton cache hit for %s", key)
                return cached

            implementation = self._registry.find_implementation(key)
            if implementation is None:
                raise WiregraphNoBindingFoundError(key)

            implementation_key = BindingKey(implementation, key.name)
            if implementation_key == key:
                return self._build_singleton(implementation_key, context)

            with context.acquire(implementation_key):
                instance = self._build_singleton(implementation_key, context)
            # Capability lookups short-circuit to the cache from now on.
            self._registry.publish_singleton(key, instance)
            return instance

    def _build_singleton(self, implementation_key: BindingKey, context: ResolutionContext) -> Any:
        with self._singleton_lock(implementation_key):
            # Double-check after acquiring the lock.
            instance = self._registry.find_singleton(implementation_key)
            if instance is not MISSING:
                return instance

            initializer = self._initializer_selector.select(
                implementation_key.type,
                implementation_key.name,
            )
            instance = self._dependency_materializer.materialize(
                initializer,
                implementation_key.name,
                context,
            )
            self._registry.publish_singleton(implementation_key, instance)
            logger.info("Constructed %s with %s", implementation_key, initializer.label)
            return instance

    def _singleton_lock(self, key: BindingKey) -> AbstractContextManager[Any]:
        if self._lock_mode is LockMode.NONE:
            return nullcontext()
        lock = self._singleton_locks.get(key)
        if lock is None:
            with self._singleton_locks_lock:
                lock = self._singleton_locks.setdefault(key, threading.RLock())
        return lock

    def _validate_type(self, dependency: object) -> None:
        if dependency is None:
            msg = "Type cannot be None."
            raise WiregraphInvalidArgumentError(msg)
        if not is_runtime_class(dependency):
            msg = f"Expected a class, got {dependency!r}."
            raise WiregraphInvalidArgumentError(msg)


__all__ = ["Container"]
