"""Exception hierarchy for advanced-random-string.

All exceptions derive from RandomStringError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class RandomStringError(Exception):
    """Base exception for all advanced-random-string errors."""


class InvalidArgumentError(RandomStringError, ValueError):
    """A sampling argument is outside its valid domain.

    Raised for an empty charset (no index range exists to sample from) or a
    negative length. Raised before any entropy is consumed.
    """


class SourceUnavailableError(RandomStringError):
    """The randomness source cannot produce a value.

    Raised when the underlying provider fails, e.g. the OS entropy device is
    inaccessible. Never retried: no partial output is returned.
    """


class ConfigValidationError(RandomStringError):
    """Configuration field validation failed.

    Raised when overrides name unknown fields, fail type validation, or
    select an unknown source or log level.
    """
