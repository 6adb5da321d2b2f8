"""Configuration system for advanced-random-string.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (RANDOM_STRING_*) -> .env file -> field defaults.

Overrides are applied via resolve_config() which creates a new config
instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from advanced_random_string.charset import BASE62
from advanced_random_string.exceptions import ConfigValidationError

LOG_LEVELS: frozenset[str] = frozenset({"none", "summary"})


class RandomStringConfig(BaseSettings):
    """Configuration for :class:`~advanced_random_string.generator.RandomStringGenerator`.

    Resolution order: init kwargs -> env vars (RANDOM_STRING_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="RANDOM_STRING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_source: str = Field(
        default="thread_local",
        description="Registered random source name: 'thread_local', 'fast', 'system' or a plugin",
    )
    default_charset: str = Field(
        default=BASE62.decode("ascii"),
        min_length=1,
        description="Charset used when generate() is called without one",
    )
    default_length: int = Field(
        default=16,
        ge=0,
        description="Length used when generate() is called without one",
    )
    log_level: str = Field(
        default="none",
        description="Logging verbosity: 'none' or 'summary'",
    )


_ALL_FIELDS: frozenset[str] = frozenset(RandomStringConfig.model_fields.keys())


def resolve_config(
    defaults: RandomStringConfig,
    overrides: dict[str, Any] | None,
) -> RandomStringConfig:
    """Create a new config instance merging *defaults* with *overrides*.

    Args:
        defaults: The base configuration, usually loaded from environment.
        overrides: Field values to replace, keyed by field name.

    Returns:
        A new RandomStringConfig, or *defaults* itself if there is nothing
        to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    unknown = sorted(set(overrides) - _ALL_FIELDS)
    if unknown:
        raise ConfigValidationError(f"Unknown config field(s): {', '.join(unknown)}")

    # model_copy(update=...) skips validation; go through model_validate so
    # "32" is coerced to 32 and bad values are rejected.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return RandomStringConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
