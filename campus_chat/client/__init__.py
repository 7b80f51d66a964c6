"""HTTPX client for the widget's backend endpoints.

Responsibilities:
    - POST chat messages and parse replies
    - POST knowledge documents as multipart uploads
    - GET the FAQ list

Transport failures, non-success statuses and malformed bodies all surface
as BackendError subclasses.
"""

from campus_chat.client.backend import BackendClient
from campus_chat.client.errors import (
    BackendError,
    BackendResponseError,
    BackendStatusError,
    BackendUnavailableError,
)

__all__ = [
    "BackendClient",
    "BackendError",
    "BackendResponseError",
    "BackendStatusError",
    "BackendUnavailableError",
]
