"""Error types raised by the audit pipeline."""

from typing import Optional


class AuditError(Exception):
    """Base class for every failure the audit pipeline reports."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(message)


class ValidationError(AuditError):
    """The audit request is missing a URL or the URL is not absolute."""


class FetchError(AuditError):
    """The primary page could not be retrieved or returned a non-2xx status."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message, url)


class NetworkError(FetchError):
    """A transport-level failure (DNS, connection refused, TLS, ...)."""


class FetchTimeoutError(FetchError):
    """A single request exceeded its time budget and was cancelled."""

    def __init__(self, url: str, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(f"Request to {url} timed out after {timeout_ms}ms", url)


class AuditTimeoutError(AuditError):
    """The whole pipeline exceeded its global deadline."""

    def __init__(self, url: Optional[str] = None, timeout_ms: Optional[int] = None):
        self.timeout_ms = timeout_ms
        super().__init__("Analysis timeout", url)
