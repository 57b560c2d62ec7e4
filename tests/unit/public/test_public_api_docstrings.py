from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

import wiregraph


def _iter_class_defined_public_methods(
    cls: type[Any],
) -> list[tuple[str, Callable[..., Any]]]:
    methods: list[tuple[str, Callable[..., Any]]] = []
    for method_name, member in cls.__dict__.items():
        if method_name.startswith("_"):
            continue

        method_func: Callable[..., Any] | None = None
        if inspect.isfunction(member):
            method_func = member
        elif isinstance(member, staticmethod | classmethod):
            method_func = member.__func__

        if method_func is None:
            continue
        methods.append((method_name, method_func))

    return sorted(methods, key=lambda item: item[0])


def test_exported_classes_and_public_methods_have_docstrings() -> None:
    missing: list[str] = []

    for export_name in sorted(wiregraph.__all__):
        exported_obj = getattr(wiregraph, export_name)
        if not inspect.isclass(exported_obj) and not callable(exported_obj):
            continue

        if not inspect.getdoc(exported_obj):
            missing.append(export_name)

        if not inspect.isclass(exported_obj):
            continue

        for method_name, method_func in _iter_class_defined_public_methods(exported_obj):
            if not inspect.getdoc(method_func):
                missing.append(f"{exported_obj.__name__}.{method_name}")

    assert not missing, "missing docstrings: " + ", ".join(missing)


def test_all_exports_resolve() -> None:
    for export_name in wiregraph.__all__:
        assert hasattr(wiregraph, export_name), export_name
