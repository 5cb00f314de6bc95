"""Custom exception hierarchy for ogcache.

Every error carries an ErrorKind so callers can branch on ``err.kind``
instead of the message text.
"""

from __future__ import annotations

from ogcache.types import ErrorKind


class OgCacheError(Exception):
    """Base exception for all ogcache errors."""

    kind: ErrorKind = ErrorKind.RENDER
    http_status: int = 500

    def __init__(self, message: str = "", original: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original = original


class ConfigurationError(OgCacheError):
    """Fatal startup error: the metadata table is unusable.

    Examples: fallback record missing, malformed metadata JSON, bad store setting.
    """

    kind = ErrorKind.CONFIGURATION

    def __init__(
        self,
        message: str = "",
        source: str | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message, original=original)
        self.source = source


class ClientInputError(OgCacheError):
    """Per-request error caused by the caller. Not retried."""

    kind = ErrorKind.CLIENT_INPUT
    http_status = 400

    def __init__(self, message: str = "", parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class RenderError(OgCacheError):
    """The renderer failed or timed out."""

    kind = ErrorKind.RENDER

    def __init__(
        self,
        message: str = "",
        timed_out: bool = False,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message, original=original)
        self.timed_out = timed_out


class StoreError(OgCacheError):
    """The artifact store could not be read or written.

    Absorbed by the generator: lookup failures become misses, write failures
    are logged.
    """

    kind = ErrorKind.STORE

    def __init__(
        self,
        message: str = "",
        operation: str = "lookup",
        key: str | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message, original=original)
        self.operation = operation
        self.key = key
