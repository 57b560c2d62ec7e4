"""Named bindings: several components of one type side by side.

A constructor parameter is looked up under its own name first and under the
default name second. ``Annotated[..., Named("...")]`` picks the name explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from wiregraph import Container, Named


@dataclass(frozen=True, slots=True)
class DatabaseSettings:
    url: str


class ReportService:
    def __init__(self, replica: DatabaseSettings) -> None:
        self.settings = replica


class BillingService:
    def __init__(self, settings: Annotated[DatabaseSettings, Named("primary")]) -> None:
        self.settings = settings


class AuditService:
    def __init__(self, settings: DatabaseSettings) -> None:
        self.settings = settings


def main() -> None:
    container = Container()
    container.register_instance(DatabaseSettings("postgres://primary"), "primary")
    container.register_instance(DatabaseSettings("postgres://replica"), "replica")
    container.register_instance(DatabaseSettings("sqlite://local"))
    container.register_type(ReportService)
    container.register_type(BillingService)
    container.register_type(AuditService)

    print(f"reports={container.resolve(ReportService).settings.url}")  # => reports=postgres://replica
    print(f"billing={container.resolve(BillingService).settings.url}")  # => billing=postgres://primary
    print(f"audit={container.resolve(AuditService).settings.url}")  # => audit=sqlite://local

    container.register_type(ReportService, "nightly")
    nightly = container.resolve(ReportService, "nightly")
    print(f"independent={nightly is not container.resolve(ReportService)}")  # => independent=True


if __name__ == "__main__":
    main()
