"""Initializers: the first usable construction path wins.

The constructor is tried first, then ``@initializer`` methods in definition
order. Parameters with default values keep them when nothing is registered.
"""

from __future__ import annotations

from dataclasses import dataclass

from wiregraph import Container, initializer


@dataclass(frozen=True, slots=True)
class Queue:
    name: str


class Worker:
    def __init__(self, queue: Queue) -> None:
        self.source = queue.name

    @initializer
    @classmethod
    def standalone(cls) -> Worker:
        return cls(Queue("in-memory"))


class RetryPolicy:
    def __init__(self, attempts: int = 3) -> None:
        self.attempts = attempts


def main() -> None:
    wired = Container()
    wired.register_instance(Queue("jobs"))
    wired.register_type(Worker)
    print(f"worker={wired.resolve(Worker).source}")  # => worker=jobs

    bare = Container()
    bare.register_type(Worker)
    print(f"fallback_worker={bare.resolve(Worker).source}")  # => fallback_worker=in-memory

    defaults = Container()
    defaults.register_type(RetryPolicy)
    print(f"attempts={defaults.resolve(RetryPolicy).attempts}")  # => attempts=3

    configured = Container()
    configured.register_instance(5, "attempts")
    configured.register_type(RetryPolicy)
    print(f"configured_attempts={configured.resolve(RetryPolicy).attempts}")  # => configured_attempts=5


if __name__ == "__main__":
    main()
