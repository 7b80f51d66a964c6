"""Request orchestration for the chat widget.

Turns UI events into store mutations and backend requests. At most one
send or upload is in flight at a time, and every request ends with the
loading flag cleared and a render, whatever the outcome.
"""

import logging
from collections.abc import Callable

from campus_chat.client.backend import BackendClient
from campus_chat.client.errors import BackendError
from campus_chat.models.schemas import FAQ, Origin
from campus_chat.state.store import ConversationStore
from campus_chat.ui.engine import KnowledgeFile

logger = logging.getLogger(__name__)

NOT_FOUND_REPLY = "Sorry, I could not find that."
UPLOAD_FAILED_REPLY = "Upload failed. Try again or contact the admin."

FALLBACK_FAQS: tuple[FAQ, ...] = (
    FAQ(
        question="What is the application deadline?",
        answer="Deadlines vary by program; generally before June 30 for fall intake.",
    ),
    FAQ(
        question="How do I apply for scholarship?",
        answer=(
            "You can apply through the scholarships page after submitting "
            "your application."
        ),
    ),
)


def connection_fallback(contact_email: str) -> str:
    """Bot message shown when the chat backend cannot answer."""
    return f"Sorry — I'm having trouble connecting. You can contact {contact_email}"


def upload_confirmation(filename: str) -> str:
    """Bot message acknowledging an uploaded knowledge document."""
    return f"Knowledge uploaded: {filename}. I will use it to answer future questions."


def match_faq(faqs: tuple[FAQ, ...] | list[FAQ], text: str) -> FAQ | None:
    """Find the first FAQ whose question contains ``text``, ignoring case.

    Args:
        faqs: FAQs in priority order.
        text: User input to look for.

    Returns:
        The first matching FAQ, or None.
    """
    needle = text.lower()
    return next((faq for faq in faqs if needle in faq.question.lower()), None)


class ChatController:
    """Drives sends, uploads and the startup FAQ load.

    Args:
        store: Conversation state to mutate.
        client: Backend client used for requests.
        render: Called after each state change that must become visible.
        clear_upload: Resets the upload control after an upload finishes.
    """

    def __init__(
        self,
        store: ConversationStore,
        client: BackendClient,
        render: Callable[[], object],
        clear_upload: Callable[[], None] | None = None,
    ) -> None:
        self._store = store
        self._client = client
        self._render = render
        self._clear_upload = clear_upload

    @property
    def contact_email(self) -> str:
        return self._client.config.contact_email

    def set_pending_input(self, text: str) -> None:
        """Record the draft text. Does not render."""
        self._store.set_pending_input(text)

    async def submit(self) -> None:
        """Send whatever is currently in the input."""
        await self.send_message(self._store.pending_input)

    async def send_message(self, text: str) -> None:
        """Send a user message, answering from the FAQs when possible.

        Args:
            text: The user's message. Ignored when blank or while loading.
        """
        if not text.strip() or self._store.is_loading:
            return

        self._store.append_message(Origin.USER, text)
        self._store.set_pending_input("")

        matched = match_faq(self._store.faqs, text)
        if matched is not None:
            logger.info(f"Answered from FAQ: {matched.question!r}")
            self._store.append_message(Origin.BOT, matched.answer)
            self._render()
            return

        self._store.set_loading(True)
        self._render()

        try:
            result = await self._client.send_chat(text)
            self._store.append_message(Origin.BOT, result.reply or NOT_FOUND_REPLY)
        except BackendError as e:
            logger.warning(f"Chat request failed: {e}")
            self._store.append_message(Origin.BOT, connection_fallback(self.contact_email))
        finally:
            self._store.set_loading(False)
            self._render()

    async def handle_upload(self, file: KnowledgeFile | None) -> None:
        """Upload a knowledge document to the backend.

        Args:
            file: The selected file, or None when the selection was cleared.
        """
        if file is None or self._store.is_loading:
            return

        self._store.set_loading(True)
        self._render()

        try:
            result = await self._client.upload_knowledge(
                file.name, file.content, file.content_type
            )
            logger.info(f"Uploaded knowledge document: {file.name}")
            self._store.append_message(
                Origin.BOT, upload_confirmation(result.filename or file.name)
            )
        except BackendError as e:
            logger.warning(f"Knowledge upload failed for {file.name}: {e}")
            self._store.append_message(Origin.BOT, UPLOAD_FAILED_REPLY)
        finally:
            self._store.set_loading(False)
            self._render()
            if self._clear_upload is not None:
                self._clear_upload()

    async def load_faqs(self) -> None:
        """Load the FAQ list, falling back to built-in FAQs on any failure."""
        try:
            faqs = await self._client.fetch_faqs()
        except BackendError as e:
            logger.warning(f"FAQ load failed, using built-in FAQs: {e}")
            faqs = list(FALLBACK_FAQS)
        self._store.set_faqs(faqs)
        self._render()
