from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from inspect import Parameter
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from wiregraph._internal.type_checks import is_platform_class, is_runtime_class
from wiregraph.binding_key import BindingKey
from wiregraph.exceptions import WiregraphDependencyExtractionError
from wiregraph.markers import Named, is_initializer

_MISSING_ANNOTATION: Any = object()
_VARIADIC_KINDS = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


@dataclass(frozen=True, slots=True)
class InitializerParameter:
    """Describe one parameter of an initializer as the container sees it.

    ``key`` is the exact ``(type, binding name)`` key and ``default_key`` the
    ``(type, DEFAULT_NAME)`` fallback. Both are ``None`` when the declared type
    is missing or is not a runtime class, which makes the parameter
    unresolvable.
    """

    name: str
    type: Any
    kind: Any
    has_default: bool
    key: BindingKey | None
    default_key: BindingKey | None
    default: Any = Parameter.empty


@dataclass(frozen=True, slots=True)
class Initializer:
    """A construction function of an implementation plus its ordered parameters."""

    implementation: type[Any]
    label: str
    build: Callable[..., Any]
    parameters: tuple[InitializerParameter, ...]

    def invoke(self, arguments: Mapping[str, Any]) -> Any:
        """Call the construction function with resolved arguments.

        Positional-only parameters are passed positionally and every other
        parameter by keyword. Parameters missing from ``arguments`` keep their
        default values; a missing positional-only parameter is filled with its
        default so the ones after it keep their positions.

        Args:
            arguments: Resolved values keyed by parameter name.

        """
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter in self.parameters:
            if parameter.kind is Parameter.POSITIONAL_ONLY:
                args.append(arguments.get(parameter.name, parameter.default))
            elif parameter.name in arguments:
                kwargs[parameter.name] = arguments[parameter.name]
        return self.build(*args, **kwargs)


class InitializerExtractor:
    """Derive the ordered initializers of implementation classes.

    The class constructor comes first (abstract classes have none), followed by
    methods marked with ``@initializer`` in class-body definition order, walking
    the MRO from the class outward. Results are cached per class.
    """

    def __init__(self) -> None:
        self._cache: dict[type[Any], tuple[Initializer, ...]] = {}

    def extract(self, implementation: type[Any]) -> tuple[Initializer, ...]:
        """Return the initializers of ``implementation`` in declaration order.

        Args:
            implementation: Concrete class registered in the container.

        Raises:
            WiregraphDependencyExtractionError: If a parameter annotation cannot
                be evaluated.

        """
        cached = self._cache.get(implementation)
        if cached is not None:
            return cached

        initializers: list[Initializer] = []
        if not inspect.isabstract(implementation):
            initializers.append(self._from_constructor(implementation))

        seen_names: set[str] = set()
        for owner in implementation.__mro__:
            if is_platform_class(owner):
                continue
            for member_name, member in vars(owner).items():
                if member_name in seen_names:
                    continue
                seen_names.add(member_name)
                if is_initializer(member):
                    initializers.append(self._from_method(implementation, member_name, member))

        result = tuple(initializers)
        self._cache[implementation] = result
        return result

    def _from_constructor(self, implementation: type[Any]) -> Initializer:
        annotations, annotation_error = self._constructor_hints(implementation)
        return Initializer(
            implementation=implementation,
            label=implementation.__qualname__,
            build=implementation,
            parameters=self._parameters(
                implementation=implementation,
                target=implementation,
                annotations=annotations,
                annotation_error=annotation_error,
            ),
        )

    def _from_method(
        self,
        implementation: type[Any],
        member_name: str,
        member: Any,
    ) -> Initializer:
        function = member.__func__ if isinstance(member, classmethod | staticmethod) else member
        annotations, annotation_error = self._hints(function)
        bound = getattr(implementation, member_name)
        return Initializer(
            implementation=implementation,
            label=f"{implementation.__qualname__}.{member_name}",
            build=bound,
            parameters=self._parameters(
                implementation=implementation,
                target=bound,
                annotations=annotations,
                annotation_error=annotation_error,
            ),
        )

    def _parameters(
        self,
        *,
        implementation: type[Any],
        target: Callable[..., Any],
        annotations: dict[str, Any],
        annotation_error: Exception | None,
    ) -> tuple[InitializerParameter, ...]:
        try:
            signature = inspect.signature(target)
        except (ValueError, TypeError):
            # Builtin bases without introspectable signatures take no arguments here.
            return ()

        parameters: list[InitializerParameter] = []
        for parameter in signature.parameters.values():
            if parameter.kind in _VARIADIC_KINDS:
                continue
            annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
            if annotation is _MISSING_ANNOTATION:
                raw_annotation = parameter.annotation
                if isinstance(raw_annotation, str) and annotation_error is not None:
                    raise WiregraphDependencyExtractionError(
                        implementation,
                        annotation_error,
                    ) from annotation_error
                if raw_annotation is not Parameter.empty and not isinstance(raw_annotation, str):
                    annotation = raw_annotation
            parameters.append(self._parameter(parameter, annotation))
        return tuple(parameters)

    def _parameter(self, parameter: Parameter, annotation: Any) -> InitializerParameter:
        declared_type, binding_name = self._split_annotation(annotation, parameter.name)
        key: BindingKey | None = None
        default_key: BindingKey | None = None
        if is_runtime_class(declared_type):
            key = BindingKey(declared_type, binding_name)
            default_key = BindingKey.default_for(declared_type)
        return InitializerParameter(
            name=parameter.name,
            type=None if declared_type is _MISSING_ANNOTATION else declared_type,
            kind=parameter.kind,
            has_default=parameter.default is not Parameter.empty,
            key=key,
            default_key=default_key,
            default=parameter.default,
        )

    def _split_annotation(self, annotation: Any, parameter_name: str) -> tuple[Any, str]:
        if get_origin(annotation) is not Annotated:
            return annotation, parameter_name
        declared_type, *metadata = get_args(annotation)
        binding_name = parameter_name
        for item in metadata:
            if isinstance(item, Named):
                binding_name = item.value
        return declared_type, binding_name

    def _constructor_hints(
        self,
        implementation: type[Any],
    ) -> tuple[dict[str, Any], Exception | None]:
        merged: dict[str, Any] = {}
        merged_error: Exception | None = None
        for callable_member_name in ("__init__", "__new__"):
            callable_member = getattr(implementation, callable_member_name)
            if not inspect.isfunction(callable_member):
                continue
            member_annotations, error = self._hints(callable_member)
            if error is not None and merged_error is None:
                merged_error = error
            for parameter_name, parameter_annotation in member_annotations.items():
                merged.setdefault(parameter_name, parameter_annotation)

        # Dataclass and pydantic fields are declared on the class body.
        class_annotations, error = self._hints(implementation)
        if error is not None and merged_error is None:
            merged_error = error
        for parameter_name, parameter_annotation in class_annotations.items():
            merged.setdefault(parameter_name, parameter_annotation)
        merged.pop("return", None)
        return merged, merged_error

    def _hints(self, target: Any) -> tuple[dict[str, Any], Exception | None]:
        try:
            return get_type_hints(target, include_extras=True), None
        except (AttributeError, NameError, TypeError) as error:
            return {}, error


__all__ = ["Initializer", "InitializerExtractor", "InitializerParameter"]
