"""Tests for coerce_source() and the generator adapters."""

from __future__ import annotations

import random
import secrets
from unittest.mock import patch

import numpy as np
import pytest

from advanced_random_string.exceptions import InvalidArgumentError, SourceUnavailableError
from advanced_random_string.sources.adapters import (
    NumpyGeneratorSource,
    RandbelowSource,
    RandomModuleSource,
    coerce_source,
)
from advanced_random_string.sources.base import RandomSource
from advanced_random_string.sources.fast import FastRandomSource


class _CountingSource(RandomSource):
    """Minimal concrete source exercising the ABC defaults."""

    def __init__(self) -> None:
        self.calls = 0

    @property
    def name(self) -> str:
        return "counting"

    @property
    def is_available(self) -> bool:
        return True

    def randbelow(self, bound: int) -> int:
        self.calls += 1
        return (self.calls - 1) % bound

    def close(self) -> None:
        pass


class TestRandomSourceDefaults:
    """Tests for the concrete members of the RandomSource ABC."""

    def test_randbelow_many_delegates_per_draw(self) -> None:
        source = _CountingSource()
        assert source.randbelow_many(3, 5) == [0, 1, 2, 0, 1]
        assert source.calls == 5

    def test_randbelow_many_zero_count(self) -> None:
        source = _CountingSource()
        assert source.randbelow_many(3, 0) == []
        assert source.calls == 0

    def test_health_check(self) -> None:
        assert _CountingSource().health_check() == {"source": "counting", "healthy": True}

    def test_repr_includes_name(self) -> None:
        assert repr(_CountingSource()) == "_CountingSource(name='counting')"

    def test_abstract_members_required(self) -> None:
        with pytest.raises(TypeError):
            RandomSource()  # type: ignore[abstract]


class TestNumpyGeneratorSource:
    def test_name_reports_bit_generator(self) -> None:
        source = NumpyGeneratorSource(np.random.Generator(np.random.MT19937(1)))
        assert source.name == "numpy:MT19937"

    def test_draws_follow_wrapped_generator(self) -> None:
        expected = np.random.default_rng(11).integers(0, 5, size=10).tolist()
        source = NumpyGeneratorSource(np.random.default_rng(11))
        assert source.randbelow_many(5, 10) == expected

    def test_single_draw_in_range(self) -> None:
        source = NumpyGeneratorSource(np.random.default_rng(0))
        assert 0 <= source.randbelow(4) < 4


class TestRandomModuleSource:
    def test_name(self) -> None:
        assert RandomModuleSource(random.Random(0)).name == "random:Random"
        assert RandomModuleSource(random.SystemRandom()).name == "random:SystemRandom"

    def test_draws_follow_randrange(self) -> None:
        reference = random.Random(99)
        expected = [reference.randrange(7) for _ in range(12)]
        assert RandomModuleSource(random.Random(99)).randbelow_many(7, 12) == expected

    def test_invalid_bound_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            RandomModuleSource(random.Random(0)).randbelow(0)


class _Cycler:
    """Duck-typed provider: has randbelow() but is not a RandomSource."""

    def __init__(self, values: list[int]) -> None:
        self._values = iter(values)

    def randbelow(self, bound: int) -> int:
        return next(self._values)


class TestRandbelowSource:
    def test_name_for_module_and_object(self) -> None:
        assert RandbelowSource(secrets).name == "randbelow:secrets"
        assert RandbelowSource(_Cycler([])).name == "randbelow:_Cycler"

    def test_draws_follow_provider(self) -> None:
        assert RandbelowSource(_Cycler([2, 0, 1])).randbelow_many(3, 3) == [2, 0, 1]

    def test_secrets_module_draws_in_range(self) -> None:
        source = RandbelowSource(secrets)
        assert all(0 <= v < 5 for v in source.randbelow_many(5, 200))

    @pytest.mark.parametrize("value", [-1, 3, 10])
    def test_out_of_range_value_raises(self, value: int) -> None:
        with pytest.raises(SourceUnavailableError, match=r"expected \[0, 3\)"):
            RandbelowSource(_Cycler([value])).randbelow(3)

    def test_non_integer_value_raises(self) -> None:
        with pytest.raises(TypeError):
            RandbelowSource(_Cycler([1.0])).randbelow(3)  # type: ignore[list-item]

    def test_invalid_bound_raises_before_draw(self) -> None:
        with patch.object(_Cycler, "randbelow") as draw:
            with pytest.raises(InvalidArgumentError):
                RandbelowSource(_Cycler([])).randbelow(0)
        draw.assert_not_called()


class TestCoerceSource:
    def test_random_source_passes_through(self) -> None:
        source = FastRandomSource(seed=1)
        assert coerce_source(source) is source

    def test_numpy_generator_is_wrapped(self) -> None:
        assert isinstance(coerce_source(np.random.default_rng(1)), NumpyGeneratorSource)

    def test_stdlib_random_is_wrapped(self) -> None:
        assert isinstance(coerce_source(random.Random(1)), RandomModuleSource)
        assert isinstance(coerce_source(random.SystemRandom()), RandomModuleSource)

    @pytest.mark.parametrize("bad", [None, 42, "seed", np.random.RandomState(0)])
    def test_unsupported_type_raises(self, bad: object) -> None:
        with pytest.raises(TypeError, match="Unsupported random source"):
            coerce_source(bad)

    def test_duck_typed_provider_is_wrapped(self) -> None:
        source = coerce_source(_Cycler([0]))
        assert isinstance(source, RandbelowSource)
        assert source.randbelow(2) == 0

    def test_secrets_module_is_wrapped(self) -> None:
        assert coerce_source(secrets).name == "randbelow:secrets"

    def test_non_callable_randbelow_rejected(self) -> None:
        class _Attr:
            randbelow = 5

        with pytest.raises(TypeError, match="Unsupported random source"):
            coerce_source(_Attr())
