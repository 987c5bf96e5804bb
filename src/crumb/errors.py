"""Crumb exception hierarchy.

Shared across metadata, factory, and config so every module raises and
catches the same types.
"""


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CrumbError):
    """Raised when cookie configuration is invalid.

    Typically raised by ``CookieConfig.__post_init__`` at startup.
    """


class InvalidArgument(CrumbError, ValueError):  # noqa: N818
    """A setter received a value outside its allowed set.

    Also a ``ValueError`` so callers that only know the builtin can catch it.
    """
