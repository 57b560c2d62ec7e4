"""Common error classes for troubleshooting.

This module triggers representative error paths and prints exception type names
so you can recognize each error category quickly.
"""

from __future__ import annotations

from typing import Any, cast

from wiregraph import (
    Container,
    WiregraphConstructionError,
    WiregraphCyclicDependencyError,
    WiregraphInvalidArgumentError,
    WiregraphNoBindingFoundError,
    WiregraphNoSuitableInitializerError,
)


class Unregistered:
    pass


class NeedsUnregistered:
    def __init__(self, dependency: Unregistered) -> None:
        self.dependency = dependency


class Chicken:
    def __init__(self, egg: Egg) -> None:
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken) -> None:
        self.chicken = chicken


class Broken:
    def __init__(self) -> None:
        msg = "connection refused"
        raise ConnectionError(msg)


class Dashboard:
    def __init__(self, broken: Broken) -> None:
        self.broken = broken


def main() -> None:
    container = Container()
    container.register_type(NeedsUnregistered)
    container.register_type(Chicken)
    container.register_type(Egg)
    container.register_type(Broken)
    container.register_type(Dashboard)

    try:
        container.resolve(Unregistered)
    except WiregraphNoBindingFoundError as error:
        missing = type(error).__name__
    print(f"missing={missing}")  # => missing=WiregraphNoBindingFoundError

    try:
        container.resolve(NeedsUnregistered)
    except WiregraphNoSuitableInitializerError as error:
        unsatisfied = type(error).__name__
    print(f"unsatisfied={unsatisfied}")  # => unsatisfied=WiregraphNoSuitableInitializerError

    try:
        container.resolve(Chicken)
    except WiregraphCyclicDependencyError as error:
        cycle = " -> ".join(key.type.__name__ for key in [*error.path, error.key])
    print(f"cycle={cycle}")  # => cycle=Chicken -> Egg -> Chicken

    try:
        container.resolve(Dashboard)
    except WiregraphConstructionError as error:
        failed_parameter = error.parameter
        cause = type(error.__cause__).__name__
    print(f"construction={failed_parameter}:{cause}")  # => construction=broken:WiregraphConstructionError

    try:
        container.register_instance(cast("Any", None))
    except WiregraphInvalidArgumentError as error:
        invalid = type(error).__name__
    print(f"invalid={invalid}")  # => invalid=WiregraphInvalidArgumentError


if __name__ == "__main__":
    main()
