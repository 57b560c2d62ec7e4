from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wiregraph._internal.type_checks import type_name
from wiregraph.exceptions import WiregraphInvalidArgumentError

DEFAULT_NAME = "default"
"""Binding name used when a registration or resolution omits ``name``."""


@dataclass(frozen=True, slots=True)
class BindingKey:
    """Identify a registry or cache entry by type and binding name.

    Equality is exact: the type is compared by identity (no subclass matching)
    and the name by string equality.
    """

    type: Any
    name: str = DEFAULT_NAME

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"Binding name must be a non-empty string, got {self.name!r}."
            raise WiregraphInvalidArgumentError(msg)

    @classmethod
    def default_for(cls, type_: Any) -> BindingKey:
        """Return the key of ``type_`` under ``DEFAULT_NAME``."""
        return cls(type_, DEFAULT_NAME)

    def __str__(self) -> str:
        return f"{type_name(self.type)}:{self.name}"
