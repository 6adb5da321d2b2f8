"""Per-thread fast random source, the default tier.

Each thread lazily gets its own PCG64 generator seeded from OS entropy, so a
single instance can be shared process-wide without locking.
"""

from __future__ import annotations

import threading

import numpy as np

from advanced_random_string.sources.adapters import check_bound
from advanced_random_string.sources.base import RandomSource


class ThreadLocalRandomSource(RandomSource):
    """One independent ``numpy.random.Generator`` per thread.

    Fast and unpredictable enough for general-purpose identifiers, but not a
    cryptographic generator.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    @property
    def name(self) -> str:
        """Return ``'thread_local'``."""
        return "thread_local"

    @property
    def is_available(self) -> bool:
        return True

    def _generator(self) -> np.random.Generator:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            rng = np.random.default_rng()
            self._local.rng = rng
        return rng

    def randbelow(self, bound: int) -> int:
        check_bound(bound)
        return int(self._generator().integers(0, bound))

    def randbelow_many(self, bound: int, count: int) -> list[int]:
        check_bound(bound)
        return self._generator().integers(0, bound, size=count).tolist()

    def close(self) -> None:
        """Drop the calling thread's generator; a new one is made on next use."""
        self._local.__dict__.pop("rng", None)
