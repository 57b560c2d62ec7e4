"""Shared pytest fixtures for wiregraph tests."""

import pytest

from wiregraph.container import Container
from wiregraph.lock_mode import LockMode


@pytest.fixture()
def container() -> Container:
    """Default container with per-key thread locks."""
    return Container()


@pytest.fixture()
def container_unlocked() -> Container:
    """Container with singleton locking disabled."""
    return Container(lock_mode=LockMode.NONE)
