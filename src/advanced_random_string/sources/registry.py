"""Name-to-class lookup for random sources.

Three places feed the registry, highest precedence first:

1. explicit registrations made with :func:`register_random_source`;
2. the built-in tiers listed in ``BUILTIN_SOURCES``, imported by dotted
   path on first lookup;
3. plugins advertised under the ``advanced_random_string.sources``
   entry-point group, loaded once on the first lookup that needs them.

Only :class:`RandomSource` subclasses are accepted from any of them.
"""

from __future__ import annotations

import importlib
import importlib.metadata
import logging
from typing import TYPE_CHECKING, Any, ClassVar

from advanced_random_string.sources.base import RandomSource

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("advanced_random_string")

_ENTRY_POINT_GROUP = "advanced_random_string.sources"

BUILTIN_SOURCES: dict[str, str] = {
    "thread_local": "advanced_random_string.sources.thread_local:ThreadLocalRandomSource",
    "fast": "advanced_random_string.sources.fast:FastRandomSource",
    "system": "advanced_random_string.sources.system:SystemRandomSource",
}


def _is_source_class(obj: Any) -> bool:
    return isinstance(obj, type) and issubclass(obj, RandomSource)


def _import_path(path: str) -> type[RandomSource]:
    module_name, _, attr = path.partition(":")
    return getattr(importlib.import_module(module_name), attr)


class RandomSourceRegistry:
    """Class-level registry of :class:`RandomSource` implementations."""

    _registry: ClassVar[dict[str, type[RandomSource]]] = {}
    _builtins_loaded: ClassVar[bool] = False
    _entry_points_loaded: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
        """Class decorator adding a source under *name*.

        An explicit registration replaces a built-in or plugin of the same
        name.

        Raises:
            TypeError: If the decorated object is not a ``RandomSource``
                subclass.

        Example::

            @register_random_source("hardware")
            class HardwareSource(RandomSource):
                ...
        """

        def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
            if not _is_source_class(source_cls):
                raise TypeError(
                    f"Cannot register {source_cls!r} as {name!r}: not a RandomSource subclass"
                )
            cls._load_builtins()
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RandomSource]:
        """Return the source class registered as *name*.

        Raises:
            KeyError: If no registration, built-in or plugin has that name.
        """
        cls._load_builtins()
        if name not in cls._registry and not cls._entry_points_loaded:
            cls._load_entry_points()
        try:
            return cls._registry[name]
        except KeyError:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown random source: {name!r}. Available: {available}") from None

    @classmethod
    def list_available(cls) -> list[str]:
        """Return every known source name, sorted."""
        cls._load_builtins()
        if not cls._entry_points_loaded:
            cls._load_entry_points()
        return sorted(cls._registry)

    @classmethod
    def _load_builtins(cls) -> None:
        if cls._builtins_loaded:
            return
        cls._builtins_loaded = True
        for name, path in BUILTIN_SOURCES.items():
            cls._registry.setdefault(name, _import_path(path))

    @classmethod
    def _load_entry_points(cls) -> None:
        """Register plugin sources, skipping any that fail to load or type-check."""
        cls._entry_points_loaded = True
        try:
            eps = importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP)
        except Exception:  # Broken distribution metadata must not break lookup.
            logger.warning("Failed to load entry points for %s", _ENTRY_POINT_GROUP, exc_info=True)
            return

        for ep in eps:
            if ep.name in cls._registry:
                continue
            try:
                loaded = ep.load()
            except Exception:  # One bad plugin must not block the others.
                logger.warning(
                    "Failed to load random source entry point %r: %s",
                    ep.name,
                    ep.value,
                    exc_info=True,
                )
                continue
            if not _is_source_class(loaded):
                logger.warning(
                    "Ignoring random source entry point %r: %s is not a RandomSource subclass",
                    ep.name,
                    ep.value,
                )
                continue
            cls._registry[ep.name] = loaded

    @classmethod
    def _reset(cls) -> None:
        """Drop explicit and plugin registrations; built-ins return on next lookup."""
        cls._registry.clear()
        cls._builtins_loaded = False
        cls._entry_points_loaded = False


register_random_source = RandomSourceRegistry.register
