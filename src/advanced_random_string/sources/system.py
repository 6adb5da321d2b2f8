"""System random source using the OS CSPRNG via ``secrets``.

This is the secure tier: suitable for tokens, keys and other
security-sensitive identifiers.
"""

from __future__ import annotations

import secrets

from advanced_random_string.exceptions import SourceUnavailableError
from advanced_random_string.sources.adapters import check_bound
from advanced_random_string.sources.base import RandomSource


class SystemRandomSource(RandomSource):
    """``secrets.randbelow()`` wrapper. Cryptographically secure, stateless.

    Failures of the OS entropy device surface as
    :class:`~advanced_random_string.exceptions.SourceUnavailableError`.
    """

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``; failures are reported per draw."""
        return True

    def randbelow(self, bound: int) -> int:
        """Return one integer from ``[0, bound)`` drawn from the OS CSPRNG.

        Raises:
            SourceUnavailableError: If the OS entropy source fails.
        """
        check_bound(bound)
        try:
            return secrets.randbelow(bound)
        except OSError as exc:
            raise SourceUnavailableError(f"OS entropy source failed: {exc}") from exc

    def close(self) -> None:
        """No-op, no resources to release."""
