"""Uniform string sampling over a charset.

One operation, four entry points differing only in where randomness comes
from:

* :func:`sample`: process-wide per-thread fast generator (general use).
* :func:`sample_fast`: fresh non-cryptographic generator per call.
* :func:`sample_secure`: OS CSPRNG, for tokens, keys and other secrets.
* :func:`sample_with_source`: any caller-supplied source, e.g. a seeded one
  for reproducible output.

Each output position is drawn independently and uniformly from the charset's
indices. All draws complete before the string is built, so a failing source
never yields partial output.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any

from advanced_random_string.charset import symbols
from advanced_random_string.exceptions import InvalidArgumentError
from advanced_random_string.sources.adapters import coerce_source
from advanced_random_string.sources.fast import FastRandomSource
from advanced_random_string.sources.system import SystemRandomSource
from advanced_random_string.sources.thread_local import ThreadLocalRandomSource

if TYPE_CHECKING:
    from advanced_random_string.charset import Charset
    from advanced_random_string.sources.base import RandomSource

_DEFAULT_SOURCE = ThreadLocalRandomSource()


def _check_length(length: int) -> int:
    if isinstance(length, bool):
        raise TypeError("length must be an integer, not bool")
    length = operator.index(length)
    if length < 0:
        raise InvalidArgumentError(f"length must be non-negative, got {length}")
    return length


def _draw(length: int, alphabet: tuple[str, ...], source: RandomSource) -> str:
    indices = source.randbelow_many(len(alphabet), length)
    return "".join(alphabet[i] for i in indices)


def sample_with_source(length: int, charset: Charset, source: Any) -> str:
    """Generate a random string using a caller-supplied source.

    Args:
        length: Number of symbols to produce; ``0`` yields ``""``.
        charset: Non-empty bytes-like or ``str`` alphabet.
        source: A :class:`~advanced_random_string.sources.RandomSource`, a
            ``numpy.random.Generator``, a ``random.Random``, or any object
            with a ``randbelow(bound)`` method such as the ``secrets`` module.

    Returns:
        A string of exactly *length* symbols drawn from *charset*.

    Raises:
        InvalidArgumentError: If *charset* is empty or *length* is negative.
        TypeError: If an argument has an unsupported type.
        SourceUnavailableError: If *source* cannot produce a value.

    Example::

        >>> from advanced_random_string.sources import FastRandomSource
        >>> a = sample_with_source(8, b"XY", FastRandomSource(seed=7))
        >>> b = sample_with_source(8, b"XY", FastRandomSource(seed=7))
        >>> a == b
        True
    """
    length = _check_length(length)
    alphabet = symbols(charset)
    return _draw(length, alphabet, coerce_source(source))


def sample(length: int, charset: Charset) -> str:
    """Generate a random string with the default per-thread fast generator.

    Fine for identifiers, test data and other non-adversarial uses. Use
    :func:`sample_secure` for anything that must stay unguessable.
    """
    return _draw(_check_length(length), symbols(charset), _DEFAULT_SOURCE)


def sample_fast(length: int, charset: Charset) -> str:
    """Generate a random string with a freshly seeded non-cryptographic generator.

    Not suitable for secrets or tokens with adversarial exposure.
    """
    return _draw(_check_length(length), symbols(charset), FastRandomSource())


def sample_secure(length: int, charset: Charset) -> str:
    """Generate a random string from the OS CSPRNG.

    Suitable for session tokens, API keys, passwords and other
    security-sensitive identifiers.
    """
    return _draw(_check_length(length), symbols(charset), SystemRandomSource())
