"""Adapters exposing third-party generators as :class:`RandomSource`.

``coerce_source()`` is how the generic entry point accepts whatever the
caller already has: a ``RandomSource`` is used as is, a
``numpy.random.Generator`` or a ``random.Random`` (including
``random.SystemRandom``) is wrapped, and so is any other object with a
``randbelow(bound)`` method, such as the ``secrets`` module.
"""

from __future__ import annotations

import operator
import random
import types
from typing import Any, Protocol, runtime_checkable

import numpy as np

from advanced_random_string.exceptions import InvalidArgumentError, SourceUnavailableError
from advanced_random_string.sources.base import RandomSource


def check_bound(bound: int) -> None:
    """Reject bounds that leave no valid index range.

    Raises:
        InvalidArgumentError: If *bound* is less than 1.
    """
    if bound < 1:
        raise InvalidArgumentError(f"bound must be at least 1, got {bound}")


class NumpyGeneratorSource(RandomSource):
    """Wraps a caller-owned ``numpy.random.Generator``.

    Draws use ``Generator.integers()``, which is unbiased for any bound.
    Not safe to share across threads.

    Args:
        generator: The numpy generator to draw from.
    """

    def __init__(self, generator: np.random.Generator) -> None:
        self._rng = generator

    @property
    def name(self) -> str:
        """Return ``'numpy:<BitGenerator>'``, e.g. ``'numpy:PCG64'``."""
        return f"numpy:{type(self._rng.bit_generator).__name__}"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def randbelow(self, bound: int) -> int:
        check_bound(bound)
        return int(self._rng.integers(0, bound))

    def randbelow_many(self, bound: int, count: int) -> list[int]:
        """Draw all *count* indices in one vectorised call."""
        check_bound(bound)
        return self._rng.integers(0, bound, size=count).tolist()

    def close(self) -> None:
        """No-op, no resources to release."""


class RandomModuleSource(RandomSource):
    """Wraps a ``random.Random`` instance (or ``random.SystemRandom``).

    Args:
        rng: The stdlib generator to draw from.
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    @property
    def name(self) -> str:
        """Return ``'random:<class name>'``, e.g. ``'random:Random'``."""
        return f"random:{type(self._rng).__name__}"

    @property
    def is_available(self) -> bool:
        return True

    def randbelow(self, bound: int) -> int:
        check_bound(bound)
        return self._rng.randrange(bound)

    def close(self) -> None:
        """No-op, the caller owns the generator."""


@runtime_checkable
class SupportsRandbelow(Protocol):
    """Anything drawing a uniform integer from ``[0, bound)``."""

    def randbelow(self, bound: int) -> int: ...


class RandbelowSource(RandomSource):
    """Wraps an object exposing ``randbelow(bound)`` without subclassing.

    Each returned value is checked against ``[0, bound)`` so a misbehaving
    provider cannot index outside the charset.

    Args:
        provider: The object to draw from, e.g. the ``secrets`` module.
    """

    def __init__(self, provider: SupportsRandbelow) -> None:
        self._provider = provider

    @property
    def name(self) -> str:
        """Return ``'randbelow:<module or class name>'``, e.g. ``'randbelow:secrets'``."""
        if isinstance(self._provider, types.ModuleType):
            return f"randbelow:{self._provider.__name__}"
        return f"randbelow:{type(self._provider).__name__}"

    @property
    def is_available(self) -> bool:
        return True

    def randbelow(self, bound: int) -> int:
        """Return the provider's draw for *bound*.

        Raises:
            SourceUnavailableError: If the provider returns a value outside
                ``[0, bound)``.
        """
        check_bound(bound)
        value = operator.index(self._provider.randbelow(bound))
        if not 0 <= value < bound:
            raise SourceUnavailableError(
                f"{self.name} returned {value} for bound {bound}; expected [0, {bound})"
            )
        return value

    def close(self) -> None:
        """No-op, the caller owns the provider."""


def coerce_source(source: Any) -> RandomSource:
    """Return *source* as a :class:`RandomSource`, wrapping it if needed.

    Args:
        source: A ``RandomSource``, ``numpy.random.Generator``,
            ``random.Random``, or any object with a callable
            ``randbelow(bound)`` method.

    Returns:
        A ``RandomSource`` drawing from *source*.

    Raises:
        TypeError: If *source* offers no supported bounded-integer API.
    """
    if isinstance(source, RandomSource):
        return source
    if isinstance(source, np.random.Generator):
        return NumpyGeneratorSource(source)
    if isinstance(source, random.Random):
        return RandomModuleSource(source)
    if isinstance(source, SupportsRandbelow) and callable(source.randbelow):
        return RandbelowSource(source)
    raise TypeError(
        f"Unsupported random source {type(source).__name__!r}: expected a RandomSource, "
        "numpy.random.Generator, random.Random or an object with a randbelow(bound) method"
    )
