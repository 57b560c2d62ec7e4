"""Tests for thread safety of Container."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from wiregraph import Container, WiregraphCyclicDependencyError


class SlowInit:
    instance_count = 0
    _count_lock = threading.Lock()

    def __init__(self) -> None:
        time.sleep(0.01)
        with self._count_lock:
            type(self).instance_count += 1


class Shared:
    pass


class Consumer:
    def __init__(self, shared: Shared) -> None:
        self.shared = shared


class LoopA:
    def __init__(self, loop_b: "LoopB") -> None:
        self.loop_b = loop_b


class LoopB:
    def __init__(self, loop_a: LoopA) -> None:
        self.loop_a = loop_a


class TestConcurrentResolution:
    def test_concurrent_first_resolution_constructs_once(self) -> None:
        """Concurrent first resolutions of one key share a single construction."""
        SlowInit.instance_count = 0
        container = Container()
        container.register_type(SlowInit)
        barrier = threading.Barrier(10)

        def resolve_service() -> SlowInit:
            barrier.wait()
            return container.resolve(SlowInit)

        with ThreadPoolExecutor(max_workers=10) as executor:
            results = list(executor.map(lambda _: resolve_service(), range(10)))

        assert SlowInit.instance_count == 1
        assert all(result is results[0] for result in results)

    def test_concurrent_resolution_of_shared_dependency(self) -> None:
        """Different consumers resolved concurrently see the same dependency."""
        container = Container()
        container.register_type(Shared)
        for index in range(8):
            container.register_type(Consumer, f"consumer-{index}")

        with ThreadPoolExecutor(max_workers=8) as executor:
            consumers = list(
                executor.map(
                    lambda index: container.resolve(Consumer, f"consumer-{index}"),
                    range(8),
                ),
            )

        assert len({id(consumer) for consumer in consumers}) == 8
        assert all(consumer.shared is consumers[0].shared for consumer in consumers)


class TestResolutionContextIsolation:
    def test_independent_resolutions_do_not_trip_cycle_detection(self) -> None:
        """Resolving the same key from many threads is never reported as a cycle."""
        container = Container()
        container.register_type(SlowInit)
        container.register_type(Shared)
        container.register_type(Consumer)
        errors: list[Exception] = []

        def resolve_all() -> None:
            try:
                container.resolve(Consumer)
                container.resolve(SlowInit)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=resolve_all) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors

    def test_cycle_detected_in_each_thread(self) -> None:
        """A cyclic graph fails the same way in every thread, one at a time."""
        container = Container()
        container.register_type(LoopA)
        container.register_type(LoopB)
        errors: list[Exception] = []

        def resolve_loop() -> None:
            try:
                container.resolve(LoopA)
            except WiregraphCyclicDependencyError as e:
                errors.append(e)

        for _ in range(3):
            thread = threading.Thread(target=resolve_loop)
            thread.start()
            thread.join()

        assert len(errors) == 3
