"""Shared pytest fixtures for advanced-random-string tests.

Provides scripted and failing random sources used across multiple test
modules.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from advanced_random_string.exceptions import SourceUnavailableError
from advanced_random_string.sources.base import RandomSource


class ScriptedSource(RandomSource):
    """Test double: replays a fixed sequence of indices.

    Each value is reduced modulo the requested bound so scripts stay valid
    for any charset size.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._pos = 0
        self.bounds: list[int] = []

    @property
    def name(self) -> str:
        return "scripted"

    @property
    def is_available(self) -> bool:
        return True

    def randbelow(self, bound: int) -> int:
        self.bounds.append(bound)
        value = self._values[self._pos % len(self._values)]
        self._pos += 1
        return value % bound

    def close(self) -> None:
        pass


class FailingSource(RandomSource):
    """Test double: fails after *ok_draws* successful draws."""

    def __init__(self, ok_draws: int = 0) -> None:
        self._remaining = ok_draws
        self.calls = 0

    @property
    def name(self) -> str:
        return "failing"

    @property
    def is_available(self) -> bool:
        return False

    def randbelow(self, bound: int) -> int:
        self.calls += 1
        if self._remaining <= 0:
            raise SourceUnavailableError("entropy exhausted")
        self._remaining -= 1
        return 0

    def close(self) -> None:
        pass


@pytest.fixture
def scripted_xyx() -> ScriptedSource:
    """Source yielding 0, 1, 0, ..., i.e. ``"XYX"`` for charset ``"XY"``."""
    return ScriptedSource([0, 1, 0])


@pytest.fixture
def failing_source() -> FailingSource:
    """Source that fails on its third draw."""
    return FailingSource(ok_draws=2)

