"""advanced-random-string: uniform random strings over any charset.

Three trust tiers of randomness (a per-thread default, an explicitly
unsecure fast generator and the OS CSPRNG) plus an entry point that takes
any caller-supplied source::

    from advanced_random_string import charset, sample, sample_secure

    sample(10, charset.BASE62)
    sample_secure(32, charset.BASE64_URL)
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("advanced-random-string")
except PackageNotFoundError:
    __version__ = "0.0.0"

from advanced_random_string import charset
from advanced_random_string.config import RandomStringConfig, resolve_config
from advanced_random_string.exceptions import (
    ConfigValidationError,
    InvalidArgumentError,
    RandomStringError,
    SourceUnavailableError,
)
from advanced_random_string.generator import RandomStringGenerator
from advanced_random_string.sampler import sample, sample_fast, sample_secure, sample_with_source
from advanced_random_string.sources import (
    FastRandomSource,
    RandomSource,
    SystemRandomSource,
    ThreadLocalRandomSource,
)

__all__ = [
    "ConfigValidationError",
    "FastRandomSource",
    "InvalidArgumentError",
    "RandomSource",
    "RandomStringConfig",
    "RandomStringError",
    "RandomStringGenerator",
    "SourceUnavailableError",
    "SystemRandomSource",
    "ThreadLocalRandomSource",
    "__version__",
    "charset",
    "resolve_config",
    "sample",
    "sample_fast",
    "sample_secure",
    "sample_with_source",
]
