from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from wiregraph.binding_key import BindingKey
from wiregraph.exceptions import WiregraphCyclicDependencyError


class ResolutionContext:
    """Track the binding keys in flight within one top-level ``resolve`` call.

    A fresh context is created per top-level call and passed explicitly through
    every recursive resolution, so concurrent callers never share cycle
    detection state.
    """

    __slots__ = ("_in_flight",)

    def __init__(self) -> None:
        # dict keeps insertion order for the reported path.
        self._in_flight: dict[BindingKey, None] = {}

    @contextmanager
    def acquire(self, key: BindingKey) -> Iterator[None]:
        """Mark ``key`` as in flight for the duration of the block.

        The key is released on every exit path, including exceptions.

        Args:
            key: Binding key about to be resolved.

        Raises:
            WiregraphCyclicDependencyError: If ``key`` is already in flight.

        """
        if key in self._in_flight:
            raise WiregraphCyclicDependencyError(key, self.path)
        self._in_flight[key] = None
        try:
            yield
        finally:
            del self._in_flight[key]

    @property
    def path(self) -> list[BindingKey]:
        """In-flight keys from the outermost request inward."""
        return list(self._in_flight)

    def __contains__(self, key: object) -> bool:
        return key in self._in_flight

    def __len__(self) -> int:
        return len(self._in_flight)
