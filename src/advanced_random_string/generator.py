"""Configured, reusable front end over a named random source."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from advanced_random_string.charset import symbols
from advanced_random_string.config import LOG_LEVELS, RandomStringConfig
from advanced_random_string.exceptions import ConfigValidationError
from advanced_random_string.sampler import sample_with_source
from advanced_random_string.sources.adapters import coerce_source
from advanced_random_string.sources.registry import RandomSourceRegistry

if TYPE_CHECKING:
    from advanced_random_string.charset import Charset
    from advanced_random_string.sources.base import RandomSource

logger = logging.getLogger("advanced_random_string")


def build_source(name: str) -> RandomSource:
    """Instantiate the registered source called *name*.

    Raises:
        ConfigValidationError: If no source is registered under *name*.
    """
    try:
        source_cls = RandomSourceRegistry.get(name)
    except KeyError as exc:
        raise ConfigValidationError(str(exc.args[0])) from exc
    return source_cls()


class RandomStringGenerator:
    """Generates strings with a fixed source and configured defaults.

    Args:
        config: Settings to use; loaded from the environment when omitted.
        source: Explicit source (anything ``coerce_source`` accepts). When
            omitted, the source named by ``config.default_source`` is built
            from the registry.

    Raises:
        ConfigValidationError: If the log level or source name is unknown.

    Example::

        with RandomStringGenerator(RandomStringConfig(default_source="system")) as gen:
            token = gen.generate(32)
    """

    def __init__(
        self,
        config: RandomStringConfig | None = None,
        source: Any = None,
    ) -> None:
        self._config = config if config is not None else RandomStringConfig()
        if self._config.log_level not in LOG_LEVELS:
            raise ConfigValidationError(
                f"Unknown log_level {self._config.log_level!r}; "
                f"expected one of {sorted(LOG_LEVELS)}"
            )
        if source is None:
            self._source = build_source(self._config.default_source)
        else:
            self._source = coerce_source(source)

    @property
    def config(self) -> RandomStringConfig:
        return self._config

    @property
    def source(self) -> RandomSource:
        return self._source

    def generate(self, length: int | None = None, charset: Charset | None = None) -> str:
        """Generate one random string.

        Args:
            length: Number of symbols; defaults to ``config.default_length``.
            charset: Alphabet; defaults to ``config.default_charset``.

        Returns:
            A string of exactly *length* symbols drawn from *charset*.
        """
        if length is None:
            length = self._config.default_length
        if charset is None:
            charset = self._config.default_charset

        result = sample_with_source(length, charset, self._source)

        if self._config.log_level == "summary":
            logger.info(
                "generated length=%d charset_size=%d source=%s",
                len(result),
                len(symbols(charset)),
                self._source.name,
            )
        return result

    def close(self) -> None:
        """Release the underlying source."""
        self._source.close()

    def __enter__(self) -> RandomStringGenerator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
