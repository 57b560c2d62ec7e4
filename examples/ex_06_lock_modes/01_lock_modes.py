"""Lock modes: construct-once guarantees under concurrent resolution.

``LockMode.THREAD`` (the default) serializes first resolutions per key so a
singleton is built exactly once even when many threads ask for it together.
``LockMode.NONE`` drops the locks for single-threaded programs.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from wiregraph import Container, LockMode


class ExpensiveClient:
    constructed = 0

    def __init__(self) -> None:
        time.sleep(0.01)
        type(self).constructed += 1


def main() -> None:
    container = Container(lock_mode=LockMode.THREAD)
    container.register_type(ExpensiveClient)
    barrier = threading.Barrier(8)

    def resolve_client(_: int) -> ExpensiveClient:
        barrier.wait()
        return container.resolve(ExpensiveClient)

    with ThreadPoolExecutor(max_workers=8) as executor:
        clients = list(executor.map(resolve_client, range(8)))

    print(f"unique_instances={len({id(client) for client in clients})}")  # => unique_instances=1
    print(f"constructed={ExpensiveClient.constructed}")  # => constructed=1

    single_threaded = Container(lock_mode=LockMode.NONE)
    single_threaded.register_type(ExpensiveClient)
    first = single_threaded.resolve(ExpensiveClient)
    print(f"same={single_threaded.resolve(ExpensiveClient) is first}")  # => same=True


if __name__ == "__main__":
    main()
