from __future__ import annotations

from collections.abc import Callable
from typing import Any, NamedTuple, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

INITIALIZER_MARKER_ATTR = "__wiregraph_initializer__"


class Named(NamedTuple):
    """Override the binding name used to resolve an initializer parameter.

    By default a parameter is resolved under its own name (falling back to the
    default name). Attach ``Named`` metadata to ``typing.Annotated`` to resolve
    it under a different binding name.

    Examples:
        .. code-block:: python

            from typing import Annotated


            class ReportService:
                def __init__(self, db: Annotated[Database, Named("replica")]) -> None:
                    self.db = db

    """

    value: str


def initializer(func: F) -> F:
    """Mark a classmethod or staticmethod as an alternative initializer.

    The container tries the class constructor first, then every marked method in
    class-body definition order, and builds the instance with the first one
    whose parameters are all registered. Apply it on top of ``classmethod`` or
    ``staticmethod``.

    Examples:
        .. code-block:: python

            class Client:
                def __init__(self, settings: ClientSettings) -> None: ...

                @initializer
                @classmethod
                def from_url(cls, url: BaseUrl) -> Client:
                    return cls(ClientSettings(url=url))

    """
    target = func.__func__ if isinstance(func, classmethod | staticmethod) else func
    setattr(target, INITIALIZER_MARKER_ATTR, True)
    return func


def is_initializer(member: object) -> bool:
    """Return true when a class-body member was marked with ``@initializer``."""
    target = member.__func__ if isinstance(member, classmethod | staticmethod) else member
    return getattr(target, INITIALIZER_MARKER_ATTR, False) is True


__all__ = ["Named", "initializer", "is_initializer"]
