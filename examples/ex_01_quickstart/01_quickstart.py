"""Quickstart: register classes, resolve the top-level service.

Every class is registered once. Resolving the outermost service builds the
whole chain from constructor type hints and caches every piece as a singleton.
"""

from __future__ import annotations

from wiregraph import Container


class Database:
    def __init__(self) -> None:
        self.host = "localhost"


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository


def main() -> None:
    container = Container()
    container.register_type(Database)
    container.register_type(UserRepository)
    container.register_type(UserService)

    service = container.resolve(UserService)

    print(f"db_host={service.repository.database.host}")  # => db_host=localhost

    chain = (
        f"{type(service).__name__}"
        f">{type(service.repository).__name__}"
        f">{type(service.repository.database).__name__}"
    )
    print(f"chain={chain}")  # => chain=UserService>UserRepository>Database

    same_service = container.resolve(UserService) is service
    same_database = container.resolve(Database) is service.repository.database
    print(f"singletons={same_service and same_database}")  # => singletons=True


if __name__ == "__main__":
    main()
