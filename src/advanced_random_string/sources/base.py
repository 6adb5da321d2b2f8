"""Abstract base class for all random sources.

Every source implements this interface: the per-thread default, the fast
seeded generator, the OS CSPRNG, and adapters around a caller's own
generator. The ABC provides a default ``randbelow_many()`` that delegates
to ``randbelow()`` and a concrete ``health_check()`` method. Subclasses must
implement the four abstract members: ``name``, ``is_available``,
``randbelow()``, and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RandomSource(ABC):
    """Abstract base for all random sources.

    Implementations produce integers uniformly distributed over ``[0, bound)``
    for any positive *bound*. Sources are not required to be safe for
    concurrent use unless a subclass documents otherwise.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'fast'``, ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide values."""

    @abstractmethod
    def randbelow(self, bound: int) -> int:
        """Return one integer drawn uniformly from ``[0, bound)``.

        Args:
            bound: Exclusive upper bound; must be at least 1.

        Returns:
            An integer ``i`` with ``0 <= i < bound``.

        Raises:
            SourceUnavailableError: If the source cannot provide a value.
        """

    def randbelow_many(self, bound: int, count: int) -> list[int]:
        """Return *count* independent draws from ``[0, bound)``.

        The default implementation calls ``randbelow()`` once per draw.
        Subclasses backed by a vectorised generator may override it.

        Args:
            bound: Exclusive upper bound; must be at least 1.
            count: Number of draws; may be zero.

        Returns:
            List of *count* integers in ``[0, bound)``.
        """
        return [self.randbelow(bound) for _ in range(count)]

    @abstractmethod
    def close(self) -> None:
        """Release resources held by the source."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
