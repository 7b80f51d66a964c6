"""HTTP client for the chat, knowledge upload and FAQ endpoints.

Wraps httpx so that the widget only ever sees validated models or a
BackendError.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from campus_chat.client.errors import (
    BackendResponseError,
    BackendStatusError,
    BackendUnavailableError,
)
from campus_chat.config import WidgetConfig, get_widget_config
from campus_chat.models.schemas import FAQ, ChatReply, KnowledgeUploadReply

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_FAQ_LIST = TypeAdapter(list[FAQ])


class BackendClient:
    """Async client for the widget's backend.

    Opens a short-lived ``httpx.AsyncClient`` per call. A custom transport
    can be injected for testing (``httpx.MockTransport`` or
    ``httpx.ASGITransport``).
    """

    def __init__(
        self,
        config: WidgetConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional widget configuration.
                    Loads from environment if not provided.
            transport: Optional transport used instead of the network.
        """
        self._config = config or get_widget_config()
        self._transport = transport

    @property
    def config(self) -> WidgetConfig:
        return self._config

    @asynccontextmanager
    async def _request(self, method: str, path: str, **kwargs) -> AsyncGenerator[httpx.Response]:
        """Issue a request and translate transport/status failures.

        Args:
            method: HTTP method.
            path: Endpoint path relative to the base URL.
            **kwargs: Passed through to ``httpx.AsyncClient.request``.

        Yields:
            The successful response.

        Raises:
            BackendUnavailableError: On connection, read or timeout failures.
            BackendStatusError: On a non-2xx status.
        """
        async with httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.request(method, path, **kwargs)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise BackendStatusError(f"HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise BackendUnavailableError(f"Connection failed: {e}") from e
            yield response

    @staticmethod
    def _parse(response: httpx.Response, model: type[ModelT]) -> ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise BackendResponseError(f"Unexpected response body: {e}") from e

    async def send_chat(self, message: str) -> ChatReply:
        """Ask the chat endpoint to answer a message.

        Args:
            message: The user's message, sent as-is.

        Returns:
            The parsed reply; ``reply`` may be None.

        Raises:
            BackendError: If the request fails in any way.
        """
        async with self._request(
            "POST", self._config.chat_path, json={"message": message}
        ) as response:
            return self._parse(response, ChatReply)

    async def upload_knowledge(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> KnowledgeUploadReply:
        """Upload a knowledge document as multipart form data.

        Args:
            filename: Original filename of the document.
            content: Raw file bytes.
            content_type: Optional MIME type.

        Returns:
            The parsed upload acknowledgement.

        Raises:
            BackendError: If the request fails in any way.
        """
        file_field = (filename, content, content_type or "application/octet-stream")
        async with self._request(
            "POST", self._config.upload_path, files={"file": file_field}
        ) as response:
            return self._parse(response, KnowledgeUploadReply)

    async def fetch_faqs(self) -> list[FAQ]:
        """Fetch the FAQ list.

        Returns:
            FAQs in the order the server lists them.

        Raises:
            BackendError: If the request fails in any way.
        """
        async with self._request("GET", self._config.faqs_path) as response:
            try:
                return _FAQ_LIST.validate_json(response.content)
            except ValidationError as e:
                raise BackendResponseError(f"Unexpected FAQ list: {e}") from e
