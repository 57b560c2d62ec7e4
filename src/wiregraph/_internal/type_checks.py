from __future__ import annotations

import sys
import sysconfig
import types
from pathlib import Path
from typing import Any, TypeGuard

_PLATFORM_MODULES = frozenset({"builtins", *sys.stdlib_module_names})
_STDLIB_ROOTS = tuple(
    {Path(sysconfig.get_paths()[scheme]).resolve() for scheme in ("stdlib", "platstdlib")},
)


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_platform_class(candidate: type[Any]) -> bool:
    """Return true when a class is defined by the Python runtime or its standard library.

    Such classes (``object``, ``abc.ABC``, ``typing.Generic``,
    ``collections.abc.Mapping``, ...) never become capability keys.

    The top-level module name must be a standard-library name and, when the
    loaded module has a file, that file must live under the interpreter's
    standard-library directories. Project modules that reuse a standard-library
    name (``types``, ``calendar``, ...) therefore still provide capabilities.

    Args:
        candidate: Class being checked.

    """
    module_name = getattr(candidate, "__module__", None) or "builtins"
    if module_name.partition(".")[0] not in _PLATFORM_MODULES:
        return False
    module_file = getattr(sys.modules.get(module_name), "__file__", None)
    if module_file is None:
        # Builtin and frozen modules.
        return True
    module_path = Path(module_file).resolve()
    return any(module_path.is_relative_to(root) for root in _STDLIB_ROOTS)


def type_name(value: Any) -> str:
    """Return the dotted ``module.QualName`` of a type for messages.

    Builtins are rendered without their module; values without a qualified name
    fall back to ``repr``.
    """
    qualname = getattr(value, "__qualname__", None)
    if qualname is None:
        return repr(value)
    module = getattr(value, "__module__", None)
    if module is None or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


__all__ = ["is_platform_class", "is_runtime_class", "type_name"]
