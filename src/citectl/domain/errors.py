"""Domain error taxonomy.

Every error here is a programming or configuration error, never a
transient condition. The service layer converts them into a failed
``ServiceResult`` using :attr:`CitationError.code`.
"""

from __future__ import annotations


class CitationError(Exception):
    """Base class for all citectl domain errors."""

    code = "CITATION_ERROR"


class InvalidConfigurationError(CitationError):
    """A required construction dependency is missing."""

    code = "INVALID_CONFIGURATION"


class UnknownLawError(InvalidConfigurationError):
    """A configured law name has no registered implementation."""

    code = "UNKNOWN_LAW"


class InvalidStateError(CitationError):
    """An operation was invoked outside its valid state."""

    code = "INVALID_STATE"


def require(value: object, name: str) -> None:
    """Raise :class:`InvalidConfigurationError` if *value* is None."""
    if value is None:
        msg = f"{name} is required"
        raise InvalidConfigurationError(msg)
