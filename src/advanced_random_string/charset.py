"""Ready-made byte charsets and charset normalisation.

A charset is any non-empty ``bytes``-like object (each byte value is one
symbol, rendered as the character with that code point) or ``str`` (each
code point is one symbol). Repeated symbols are allowed and weight the
draw accordingly.
"""

from __future__ import annotations

from typing import Union

from advanced_random_string.exceptions import InvalidArgumentError

Charset = Union[bytes, bytearray, memoryview, str]

NUMERIC: bytes = b"0123456789"
ALPHA_LOWER: bytes = b"abcdefghijklmnopqrstuvwxyz"
ALPHA_UPPER: bytes = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHA: bytes = ALPHA_UPPER + ALPHA_LOWER
BASE62: bytes = NUMERIC + ALPHA_UPPER + ALPHA_LOWER
ALPHANUMERIC: bytes = BASE62
HEX_LOWER: bytes = b"0123456789abcdef"
HEX_UPPER: bytes = b"0123456789ABCDEF"
BASE64: bytes = ALPHA_UPPER + ALPHA_LOWER + NUMERIC + b"+/"
BASE64_URL: bytes = ALPHA_UPPER + ALPHA_LOWER + NUMERIC + b"-_"
PUNCTUATION: bytes = b"!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"


def symbols(charset: Charset) -> tuple[str, ...]:
    """Normalise *charset* to a tuple of one-character strings.

    Byte values map to the character with the same code point (Latin-1), so
    ``b"\\xe9"`` yields ``"é"``.

    Raises:
        TypeError: If *charset* is not bytes-like or ``str``, or is a
            ``memoryview`` whose items are wider than one byte.
        InvalidArgumentError: If *charset* is empty.
    """
    if isinstance(charset, str):
        result = tuple(charset)
    elif isinstance(charset, memoryview) and charset.itemsize != 1:
        raise TypeError(
            f"memoryview charset must have 1-byte items, got format {charset.format!r} "
            f"with itemsize {charset.itemsize}"
        )
    elif isinstance(charset, (bytes, bytearray, memoryview)):
        result = tuple(bytes(charset).decode("latin-1"))
    else:
        raise TypeError(
            f"charset must be bytes, bytearray, memoryview or str, not {type(charset).__name__}"
        )
    if not result:
        raise InvalidArgumentError("charset must contain at least one symbol")
    return result
