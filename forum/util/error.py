"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings describe something the service cannot run with.

    Example: a database URL whose driver is not async-capable.
    """

    pass


class DependencyInjectionError(UtilError):
    """Raised when no provider implementation matches a requested component."""

    pass
