"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[hyperup]`` section cannot be turned into a valid
    chain, e.g. when ``endings`` is not a list of strings. Caught at the CLI
    boundary and reported with ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from hyperup.domain.errors import ConfigurationError
        >>> err = ConfigurationError("endings must be a list of strings")
        >>> str(err)
        'endings must be a list of strings'
    """


__all__ = [
    "ConfigurationError",
]
