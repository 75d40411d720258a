"""Typed exception hierarchy for Outline API client errors.

This module defines all custom exceptions raised by the Outline client library.
All exceptions inherit from OutlineError so callers can catch any client
failure in one place. Errors raised at a well-defined pipeline stage carry the
stage name and the underlying cause so the original diagnostic is never lost.
"""

from typing import Optional


class SyncError(Exception):
    """Base exception for all outline-sync errors.

    Use this to catch any application-level error from the sync tool.
    """
    pass


class OutlineError(SyncError):
    """Base exception for all Outline API errors."""
    pass


class StageError(OutlineError):
    """An OutlineError tagged with the request stage at which it occurred."""

    stage = "request"

    def __init__(self, cause: Exception, stage: Optional[str] = None):
        if stage is not None:
            self.stage = stage
        self.cause = cause
        super().__init__(self._describe(cause))

    def _describe(self, cause: Exception) -> str:
        return f"{self.stage}: {cause}"


class RequestBuildError(StageError):
    """Raised when an HTTP request cannot be constructed (bad URL, bad payload)."""

    stage = "creating request"


class TransportError(StageError):
    """Raised when the request cannot be sent or the response body cannot be read."""

    stage = "executing request"


class ResponseDecodeError(StageError):
    """Raised when a response body is not the JSON envelope we expect."""

    stage = "decoding response"

    def __init__(self, cause: Exception, status_code: int = 0, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(cause)

    def _describe(self, cause: Exception) -> str:
        return f"{self.stage} (status {self.status_code}): {cause}"


class RemoteAPIError(OutlineError):
    """Raised when the service answers non-2xx with a structured error payload."""

    def __init__(self, status_code: int, error: str, message: str):
        super().__init__(f"API error: {error} - {message}")
        self.status_code = status_code
        self.error = error
        self.message = message


class RemoteStatusError(OutlineError):
    """Raised when the service answers non-2xx without a structured error payload."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"unexpected status code: {status_code}, body: {body}")
        self.status_code = status_code
        self.body = body
