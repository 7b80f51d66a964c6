"""Render/bind engine.

Every ``render()`` projects the current state, asks the view to rebuild the
whole widget, and hands it a brand-new handler set. Handler sets carry the
generation of the render that produced them; once a newer render has run,
an older set is stale and its handlers do nothing.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol

from campus_chat.state.store import ConversationStore
from campus_chat.ui.projection import MAX_FAQ_SHORTCUTS, Projection, project

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnowledgeFile:
    """A file picked in the upload control."""

    name: str
    content: bytes
    content_type: str | None = None


class InteractionHandler(Protocol):
    """What bound UI events are forwarded to."""

    def set_pending_input(self, text: str) -> None: ...

    async def submit(self) -> None: ...

    async def send_message(self, text: str) -> None: ...

    async def handle_upload(self, file: KnowledgeFile | None) -> None: ...


@dataclass(frozen=True)
class Bindings:
    """Handlers for the elements of one render.

    Attributes:
        generation: Render generation these handlers belong to.
        on_input: Input value changed.
        on_submit: Form submitted (send button or Enter).
        on_shortcut: Suggestion, category or FAQ shortcut activated.
        on_upload: Knowledge file selected.
    """

    generation: int
    on_input: Callable[[str], None]
    on_submit: Callable[[], Awaitable[None]]
    on_shortcut: Callable[[str], Awaitable[None]]
    on_upload: Callable[[KnowledgeFile | None], Awaitable[None]]


class View(Protocol):
    """Something that can materialize a projection."""

    def build(self, projection: Projection, bindings: Bindings) -> None: ...

    def clear_upload(self) -> None: ...


class RenderEngine:
    """Projects the store into the attached view and rebinds handlers."""

    def __init__(
        self,
        store: ConversationStore,
        view: View | None = None,
        max_faqs: int = MAX_FAQ_SHORTCUTS,
    ) -> None:
        self._store = store
        self._view = view
        self._max_faqs = max_faqs
        self._handler: InteractionHandler | None = None
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of renders performed so far."""
        return self._generation

    def connect(self, handler: InteractionHandler) -> None:
        """Set the target bound events are forwarded to."""
        self._handler = handler

    def render(self) -> Projection | None:
        """Rebuild the whole widget from the current state.

        Returns:
            The projection that was drawn, or None when no view is attached.
        """
        if self._view is None:
            logger.debug("No view attached, skipping render")
            return None

        projection = project(self._store.snapshot(), self._max_faqs)
        self._generation += 1
        self._view.build(projection, self._bind(self._generation))
        return projection

    def clear_upload(self) -> None:
        """Reset the file selection of the currently displayed upload control."""
        if self._view is not None:
            self._view.clear_upload()

    def _target(self, generation: int, event: str) -> InteractionHandler | None:
        """Return the handler if ``generation`` is still the displayed one."""
        if generation != self._generation:
            logger.debug(
                f"Ignoring stale {event} from render {generation} "
                f"(current {self._generation})"
            )
            return None
        return self._handler

    def _bind(self, generation: int) -> Bindings:
        def on_input(text: str) -> None:
            if handler := self._target(generation, "input"):
                handler.set_pending_input(text)

        async def on_submit() -> None:
            if handler := self._target(generation, "submit"):
                await handler.submit()

        async def on_shortcut(text: str) -> None:
            if handler := self._target(generation, "shortcut"):
                await handler.send_message(text)

        async def on_upload(file: KnowledgeFile | None) -> None:
            if handler := self._target(generation, "upload"):
                await handler.handle_upload(file)

        return Bindings(
            generation=generation,
            on_input=on_input,
            on_submit=on_submit,
            on_shortcut=on_shortcut,
            on_upload=on_upload,
        )
