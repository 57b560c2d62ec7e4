from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for singleton construction.

    The registry itself is always written under a container-wide lock; this
    setting only controls how first resolutions of a key are serialized.
    """

    THREAD = "thread"
    """Guard each singleton key with a ``threading.RLock`` so concurrent first
    resolutions construct exactly once."""

    NONE = "none"
    """Disable locking. Use only when resolution happens on a single thread
    after registration has finished."""
