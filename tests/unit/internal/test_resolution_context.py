from __future__ import annotations

import pytest

from wiregraph import BindingKey, WiregraphCyclicDependencyError
from wiregraph._internal.resolution_context import ResolutionContext


class _First:
    pass


class _Second:
    pass


def test_acquire_tracks_path_in_order() -> None:
    context = ResolutionContext()
    first = BindingKey(_First)
    second = BindingKey(_Second, "other")

    with context.acquire(first), context.acquire(second):
        assert context.path == [first, second]
        assert first in context
        assert len(context) == 2

    assert len(context) == 0
    assert first not in context


def test_reacquiring_in_flight_key_raises_with_path() -> None:
    context = ResolutionContext()
    first = BindingKey(_First)
    second = BindingKey(_Second)

    with context.acquire(first), context.acquire(second):
        with pytest.raises(WiregraphCyclicDependencyError) as exc_info:
            with context.acquire(first):
                pass

    assert exc_info.value.key == first
    assert exc_info.value.path == [first, second]


def test_key_is_released_when_block_raises() -> None:
    context = ResolutionContext()
    key = BindingKey(_First)

    with pytest.raises(RuntimeError):
        with context.acquire(key):
            msg = "failure"
            raise RuntimeError(msg)

    with context.acquire(key):
        assert key in context


def test_same_type_under_other_name_is_not_a_cycle() -> None:
    context = ResolutionContext()

    with context.acquire(BindingKey(_First, "a")), context.acquire(BindingKey(_First, "b")):
        assert len(context) == 2
