"""Errors raised by the backend client.

Every failure mode of a backend call maps onto one subclass of
BackendError, so callers can collapse them into a single fallback.
"""


class BackendError(Exception):
    """Raised when a backend request does not produce a usable response."""

    pass


class BackendUnavailableError(BackendError):
    """Raised when the backend cannot be reached (connect, read, timeout)."""

    pass


class BackendStatusError(BackendError):
    """Raised when the backend answers with a non-success status."""

    pass


class BackendResponseError(BackendError):
    """Raised when a response body is malformed or misses expected fields."""

    pass
