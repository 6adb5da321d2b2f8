"""Fast, non-cryptographic random source backed by numpy's PCG64.

Seeded from OS entropy unless a seed is given, in which case the output
sequence is reproducible. Never use it for secrets, tokens or anything an
adversary may try to predict.
"""

from __future__ import annotations

import numpy as np

from advanced_random_string.sources.adapters import NumpyGeneratorSource


class FastRandomSource(NumpyGeneratorSource):
    """Seedable PCG64 generator, the "unsecure" tier.

    Args:
        seed: Optional seed for reproducible output. ``None`` seeds from
            OS entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(np.random.default_rng(seed))
        self._seed = seed

    @property
    def name(self) -> str:
        """Return ``'fast'``."""
        return "fast"

    @property
    def seed(self) -> int | None:
        """The seed this source was created with, if any."""
        return self._seed
