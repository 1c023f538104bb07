"""
Exceptions raised by the Entrez client.

Every error carries the data source tag and, when one applies, the HTTP
status code.  Callers branch on the subclass:

  UpstreamError     — E-utilities answered with a non-2xx status
  NotFoundError     — the request succeeded but nothing matched (404)
  EntrezParseError  — the response could not be decoded or navigated
  NetworkError      — the request never produced a response
"""

from ncbi_toolkit.constants import SOURCE_NAME


class EntrezError(Exception):
    """Base exception for E-utilities failures."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        source: str = SOURCE_NAME,
    ):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


class UpstreamError(EntrezError):
    """Raised when E-utilities returns a non-success HTTP status."""

    def __init__(self, status_code: int, body: str = "", reason: str | None = None):
        self.body = body
        message = f"HTTP {status_code}"
        if reason:
            message += f": {reason}"
        super().__init__(message, status_code=status_code)


class NotFoundError(EntrezError):
    """Raised when a lookup succeeds upstream but yields nothing."""

    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class NoAbstractError(NotFoundError):
    """Raised when an EFetch record has no Abstract element."""

    pass


class EntrezParseError(EntrezError):
    """Raised when a response body cannot be decoded into the expected shape."""

    pass


class NetworkError(EntrezError):
    """Raised on connection failures before any HTTP status is received."""

    pass


class EntrezTimeoutError(NetworkError):
    """Raised when a request exceeds the configured timeout."""

    pass
