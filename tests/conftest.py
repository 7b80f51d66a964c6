"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - widget_config: Deterministic widget configuration
    - recording_view: View that records every projection and handler set
    - make_client: BackendClient factory over an httpx MockTransport handler
    - knowledge_store: In-memory stand-in for the agno vector store
    - knowledge_base: Knowledge base over ``knowledge_store`` with the default FAQs
    - api_app: Demo FastAPI app created with ``knowledge_base``
    - user: NiceGUI simulated user (from nicegui.testing.user_plugin)
    - async_client: HTTPX client for API testing
    - asgi_backend: BackendClient talking to ``api_app`` in-process
"""

import re
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
from agno.knowledge.document import Document
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from campus_chat.api.app import create_app
from campus_chat.client.backend import BackendClient
from campus_chat.config import WidgetConfig
from campus_chat.knowledge.faqs import DEFAULT_FAQS
from campus_chat.knowledge.service import KnowledgeBase
from campus_chat.ui.engine import Bindings
from campus_chat.ui.projection import Projection

pytest_plugins = ["nicegui.testing.user_plugin"]


class RecordingView:
    """View double that keeps every projection and handler set it receives."""

    def __init__(self) -> None:
        self.frames: list[Projection] = []
        self.bindings: list[Bindings] = []
        self.upload_resets = 0

    def build(self, projection: Projection, bindings: Bindings) -> None:
        self.frames.append(projection)
        self.bindings.append(bindings)

    def clear_upload(self) -> None:
        self.upload_resets += 1

    @property
    def latest(self) -> Projection:
        return self.frames[-1]

    @property
    def latest_bindings(self) -> Bindings:
        return self.bindings[-1]


@pytest.fixture
def widget_config() -> WidgetConfig:
    """Return configuration pointing at an in-process test backend."""
    return WidgetConfig(
        api_base_url="http://test",
        request_timeout=5,
        contact_email="admissions@college.edu",
    )


@pytest.fixture
def recording_view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def make_client(widget_config: WidgetConfig) -> Callable[..., BackendClient]:
    """Return a factory building a BackendClient over a mock handler.

    Returns:
        Callable taking an httpx MockTransport handler (sync or async).
    """

    def factory(handler: Callable) -> BackendClient:
        return BackendClient(widget_config, transport=httpx.MockTransport(handler))

    return factory


class InMemoryKnowledge:
    """Stand-in for agno ``Knowledge`` that ranks passages by shared words.

    Only words of four or more letters count, so the ranking ignores most
    filler words.
    """

    def __init__(self) -> None:
        self.contents: list[dict[str, Any]] = []

    async def add_content_async(self, **kwargs: Any) -> None:
        self.contents.append(kwargs)

    @staticmethod
    def _words(text: str) -> set[str]:
        return {w for w in re.findall(r"[a-z]+", text.lower()) if len(w) >= 4}

    async def async_search(self, query: str, max_results: int | None = None) -> list[Document]:
        wanted = self._words(query)
        scored = [
            (len(wanted & self._words(c["text_content"])), c)
            for c in self.contents
        ]
        ranked = sorted((s for s in scored if s[0]), key=lambda s: s[0], reverse=True)
        return [
            Document(content=c["text_content"], name=c["name"], meta_data=c.get("metadata") or {})
            for _, c in ranked[:max_results]
        ]

    def names(self) -> list[str]:
        return [c["name"] for c in self.contents]


@pytest.fixture
def knowledge_store() -> InMemoryKnowledge:
    return InMemoryKnowledge()


@pytest.fixture
def knowledge_base(knowledge_store: InMemoryKnowledge) -> KnowledgeBase:
    """Return a knowledge base over an empty store, seeded with the default FAQs."""
    return KnowledgeBase(knowledge_store, list(DEFAULT_FAQS))


@pytest.fixture
def api_app(knowledge_base: KnowledgeBase) -> FastAPI:
    """Create the demo backend answering from ``knowledge_base``."""
    return create_app(knowledge_base)


@pytest.fixture
async def async_client(api_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=api_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def asgi_backend(widget_config: WidgetConfig, api_app: FastAPI) -> BackendClient:
    """Return a BackendClient that calls the demo backend in-process."""
    return BackendClient(widget_config, transport=ASGITransport(app=api_app))
