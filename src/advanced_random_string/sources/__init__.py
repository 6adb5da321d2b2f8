"""Random source subsystem for advanced-random-string.

Re-exports the ABC, registry, adapters and all built-in source
implementations for convenient access::

    from advanced_random_string.sources import RandomSource, RandomSourceRegistry
    from advanced_random_string.sources import FastRandomSource, SystemRandomSource
"""

from advanced_random_string.sources.adapters import (
    NumpyGeneratorSource,
    RandbelowSource,
    RandomModuleSource,
    SupportsRandbelow,
    coerce_source,
)
from advanced_random_string.sources.base import RandomSource
from advanced_random_string.sources.fast import FastRandomSource
from advanced_random_string.sources.registry import RandomSourceRegistry, register_random_source
from advanced_random_string.sources.system import SystemRandomSource
from advanced_random_string.sources.thread_local import ThreadLocalRandomSource

__all__ = [
    "FastRandomSource",
    "NumpyGeneratorSource",
    "RandbelowSource",
    "RandomModuleSource",
    "RandomSource",
    "RandomSourceRegistry",
    "SupportsRandbelow",
    "SystemRandomSource",
    "ThreadLocalRandomSource",
    "coerce_source",
    "register_random_source",
]
