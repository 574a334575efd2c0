"""
Upstream error types.

Raised by adapters when the OData service cannot be reached or answers
with a non-success status. The API layer turns these into uniform
``{success: false, error}`` responses.
"""

from typing import Optional


class UpstreamError(Exception):
    """Base class for failures talking to the upstream data source."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url


class UpstreamUnavailableError(UpstreamError):
    """Client not initialized yet, or the transport failed."""

    NOT_READY_MESSAGE = "Upstream client not initialized yet. Please wait and try again."

    @classmethod
    def not_ready(cls) -> "UpstreamUnavailableError":
        return cls(cls.NOT_READY_MESSAGE)


class UpstreamHTTPError(UpstreamError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, url: Optional[str] = None):
        super().__init__(f"API request failed: {status_code} {reason}", url=url)
        self.status_code = status_code
        self.reason = reason
