from __future__ import annotations

from typing import TYPE_CHECKING, Any

from wiregraph._internal.type_checks import type_name

if TYPE_CHECKING:
    from wiregraph.binding_key import BindingKey


class WiregraphError(Exception):
    """Represent a base class for all wiregraph-specific failures.

    Catch this type when you want to handle any wiregraph error path without
    matching each concrete exception class individually.
    """


class WiregraphInvalidArgumentError(WiregraphError):
    """Signal an invalid argument passed to a registration or resolution call.

    Raised synchronously by ``Container.register_type``,
    ``Container.register_instance`` and ``Container.resolve`` when the type is
    missing or not a class, the instance is ``None``, or the binding name is
    empty or not a string.
    """


class WiregraphResolutionError(WiregraphError):
    """Represent a failure raised while resolving a binding key.

    Resolution errors are fail-fast: the whole ``resolve`` call is aborted and
    nothing is cached for the keys that were being built.
    """


class WiregraphNoBindingFoundError(WiregraphResolutionError):
    """Signal that a binding key has neither a binding nor a capability mapping.

    Typical fixes include registering the implementation with
    ``register_type``/``register_instance`` under the requested name, or
    resolving with the name the implementation was registered under.
    """

    def __init__(self, key: BindingKey) -> None:
        self.key = key
        msg = f"No binding found for {type_name(key.type)} with name '{key.name}'."
        super().__init__(msg)


class WiregraphNoSuitableInitializerError(WiregraphResolutionError):
    """Signal that no initializer of an implementation can be satisfied.

    Every initializer declared by the implementation (its constructor and any
    ``@initializer`` methods) has at least one required parameter whose key is
    not registered under the parameter name nor under the default name.

    Typical fixes include registering the missing parameter types, giving the
    parameter a default value, or adding an ``@initializer`` whose parameters
    are registered.
    """

    def __init__(self, implementation: type[Any], name: str) -> None:
        self.implementation = implementation
        self.name = name
        msg = (
            f"No suitable initializer found for {type_name(implementation)} "
            f"with binding name '{name}'."
        )
        super().__init__(msg)


class WiregraphCyclicDependencyError(WiregraphResolutionError):
    """Signal that a binding key was re-entered while it was still being resolved.

    ``path`` lists the in-flight keys from the outermost request to the key
    that closed the cycle.
    """

    def __init__(self, key: BindingKey, path: list[BindingKey]) -> None:
        self.key = key
        self.path = path
        chain = " -> ".join(str(item) for item in [*path, key])
        msg = f"Cyclic dependency detected for {key}: {chain}"
        super().__init__(msg)


class WiregraphConstructionError(WiregraphResolutionError):
    """Signal that building an implementation failed.

    Raised in two situations, always chained to the original exception:

    * a parameter of the selected initializer could not be resolved; then
      ``parameter`` and ``parameter_type`` name it and the message embeds the
      nested failure, so the top-level message reads as the resolution path;
    * the initializer itself raised; then ``parameter`` is ``None``.
    """

    def __init__(
        self,
        implementation: type[Any],
        name: str,
        *,
        detail: str,
        parameter: str | None = None,
        parameter_type: Any = None,
    ) -> None:
        self.implementation = implementation
        self.name = name
        self.parameter = parameter
        self.parameter_type = parameter_type
        if parameter is None:
            msg = (
                f"Failed to construct {type_name(implementation)} "
                f"with binding name '{name}': {detail}"
            )
        else:
            msg = (
                f"Failed to resolve parameter '{parameter}' of type "
                f"{type_name(parameter_type)} for {type_name(implementation)}: {detail}"
            )
        super().__init__(msg)


class WiregraphDependencyExtractionError(WiregraphError):
    """Signal that initializer parameter annotations could not be evaluated.

    Common triggers are forward references to names that are not importable
    from the implementation's module. Raised as is for the requested
    implementation; for a nested dependency it is wrapped in
    ``WiregraphConstructionError`` naming the parameter that required it.
    """

    def __init__(self, implementation: type[Any], error: Exception) -> None:
        self.implementation = implementation
        self.error = error
        msg = (
            f"Unable to read initializer annotations of {type_name(implementation)}: "
            f"{error}"
        )
        super().__init__(msg)


class WiregraphConfigurationError(WiregraphError):
    """Signal that the server configuration could not be loaded.

    Raised by ``load_server_config`` when the resource or file is missing, is
    not valid JSON, or does not match the ``ServerProperties`` schema.
    """
