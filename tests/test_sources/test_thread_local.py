"""Tests for ThreadLocalRandomSource."""

from __future__ import annotations

import threading

from advanced_random_string.sources.thread_local import ThreadLocalRandomSource


class TestThreadLocalRandomSource:
    """Tests for the per-thread default source."""

    def test_name(self) -> None:
        assert ThreadLocalRandomSource().name == "thread_local"

    def test_draws_in_range(self) -> None:
        source = ThreadLocalRandomSource()
        values = source.randbelow_many(62, 500)
        assert len(values) == 500
        assert all(0 <= v < 62 for v in values)
        assert 0 <= source.randbelow(3) < 3

    def test_generator_reused_within_thread(self) -> None:
        source = ThreadLocalRandomSource()
        assert source._generator() is source._generator()

    def test_each_thread_gets_its_own_generator(self) -> None:
        source = ThreadLocalRandomSource()
        seen: list[object] = []
        lock = threading.Lock()

        def worker() -> None:
            rng = source._generator()
            with lock:
                seen.append(rng)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        seen.append(source._generator())
        assert len({id(rng) for rng in seen}) == 5

    def test_concurrent_use_produces_valid_output(self) -> None:
        source = ThreadLocalRandomSource()
        errors: list[BaseException] = []
        results: list[list[int]] = []
        lock = threading.Lock()

        def worker() -> None:
            try:
                values = source.randbelow_many(26, 1000)
            except BaseException as exc:  # surfaced below
                errors.append(exc)
                return
            with lock:
                results.append(values)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(results) == 8
        assert all(len(r) == 1000 and all(0 <= v < 26 for v in r) for r in results)

    def test_close_resets_current_thread(self) -> None:
        source = ThreadLocalRandomSource()
        first = source._generator()
        source.close()
        assert source._generator() is not first

    def test_close_without_use_is_safe(self) -> None:
        ThreadLocalRandomSource().close()
