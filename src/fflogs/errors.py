from typing import Any


class FFLogsError(Exception):
    """Base class for errors raised by the FF Logs client."""


class FFLogsConfigError(FFLogsError):
    """Raised when FF Logs configuration is invalid or missing."""


class TransportError(FFLogsError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class UpstreamError(FFLogsError):
    """Raised when FF Logs answers with a non-2xx status or an unreadable body.

    ``body`` holds the parsed JSON error object when the response was JSON,
    otherwise the raw response text.
    """

    def __init__(self, status_code: int, body: Any, *, url: str) -> None:
        super().__init__(f"FF Logs responded {status_code}: {body}")
        self.status_code = status_code
        self.body = body
        self.url = url
