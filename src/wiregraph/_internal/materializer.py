from __future__ import annotations

from collections.abc import Callable
from typing import Any

from wiregraph._internal.initializers import Initializer
from wiregraph._internal.resolution_context import ResolutionContext
from wiregraph._internal.selector import InitializerSelector
from wiregraph.binding_key import BindingKey
from wiregraph.exceptions import (
    WiregraphConstructionError,
    WiregraphCyclicDependencyError,
    WiregraphDependencyExtractionError,
    WiregraphResolutionError,
)

ResolveKey = Callable[[BindingKey, ResolutionContext], Any]


class DependencyMaterializer:
    """Resolve the parameters of a selected initializer and invoke it."""

    def __init__(self, selector: InitializerSelector, resolve_key: ResolveKey) -> None:
        self._selector = selector
        self._resolve_key = resolve_key

    def materialize(
        self,
        initializer: Initializer,
        name: str,
        context: ResolutionContext,
    ) -> Any:
        """Build an instance with ``initializer``.

        Parameters are resolved in order through the resolution engine with the
        same ``context``. Parameters without a registered key keep their
        default values.

        Args:
            initializer: Initializer chosen by the selector.
            name: Binding name the implementation is being resolved under.
            context: Resolution context of the current top-level call.

        Raises:
            WiregraphCyclicDependencyError: If a parameter closes a cycle.
            WiregraphConstructionError: If a parameter fails to resolve, its
                implementation has unreadable annotations, or the initializer
                itself raises.

        """
        implementation = initializer.implementation
        arguments: dict[str, Any] = {}
        for parameter in initializer.parameters:
            key = self._selector.key_for(parameter)
            if key is None:
                continue
            try:
                arguments[parameter.name] = self._resolve_key(key, context)
            except WiregraphCyclicDependencyError:
                raise
            except (WiregraphResolutionError, WiregraphDependencyExtractionError) as error:
                raise WiregraphConstructionError(
                    implementation,
                    name,
                    detail=str(error),
                    parameter=parameter.name,
                    parameter_type=parameter.type,
                ) from error

        try:
            return initializer.invoke(arguments)
        except Exception as error:
            detail = f"initializer {initializer.label} raised {type(error).__name__}: {error}"
            raise WiregraphConstructionError(implementation, name, detail=detail) from error


__all__ = ["DependencyMaterializer"]
