"""
Exception hierarchy for pokesearch.

Everything the command line reports to the user derives from PokesearchError.
Remote failures are FetchError subclasses and reach the user wrapped in an
EntityLookupError, with the original exception preserved as ``__cause__``.
"""

from typing import Optional


class PokesearchError(Exception):
    """Base class for all errors surfaced by pokesearch."""


class InvalidInputError(PokesearchError):
    """A command-line argument cannot be used (empty name, too many types, ...)."""


class CacheError(PokesearchError):
    """Reading or writing a cache file failed."""


class PresentationError(PokesearchError):
    """An entity is missing data the presenter needs."""


class FetchError(Exception):
    """A request to the remote API failed."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class NotFoundError(FetchError):
    """The requested name does not exist upstream (HTTP 404)."""


class NetworkError(FetchError):
    """The request never produced a response (connection failure, timeout)."""


class RateLimitedError(FetchError):
    """The API refused the request because of rate limiting (HTTP 429)."""


class UpstreamError(FetchError):
    """The API answered with any other non-2xx status or an unreadable body."""


class EntityLookupError(PokesearchError):
    """Resolving an entity failed because the fetch failed."""

    def __init__(self, kind: str, text: str, error: FetchError):
        super().__init__(f"failed to resolve {kind} '{text}' - {error}")
        self.kind = kind
        self.text = text
        self.error = error
