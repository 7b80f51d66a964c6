"""Conversation state store.

Owns the widget's mutable state and the only operations allowed to change
it. Has no rendering knowledge; the render engine reads snapshots and the
controller calls the mutators.
"""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from campus_chat.models.schemas import FAQ, Message, Origin

logger = logging.getLogger(__name__)

GREETING = (
    "Hi! I can help with admissions, courses, fees, placements and more. "
    "How can I help you today?"
)


class ConversationState(BaseModel):
    """Immutable view of the conversation at one point in time.

    Attributes:
        messages: Transcript in chronological order.
        pending_input: Current draft text of the input control.
        is_loading: Whether a send or upload is outstanding.
        faqs: FAQ list loaded at startup.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...]
    pending_input: str
    is_loading: bool
    faqs: tuple[FAQ, ...]


class ConversationStore:
    """Holds the conversation state for one widget instance.

    The transcript is append-only. All mutators are synchronous and total.
    """

    def __init__(self, greeting: str | None = GREETING) -> None:
        self._messages: list[Message] = []
        self._pending_input: str = ""
        self._is_loading: bool = False
        self._faqs: list[FAQ] = []
        if greeting:
            self._messages.append(Message(origin=Origin.BOT, text=greeting))

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def pending_input(self) -> str:
        return self._pending_input

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def faqs(self) -> tuple[FAQ, ...]:
        return tuple(self._faqs)

    def append_message(self, origin: Origin, text: str) -> Message:
        """Append a message to the end of the transcript.

        Args:
            origin: Who authored the message.
            text: Message text, stored verbatim.

        Returns:
            The appended message.
        """
        message = Message(origin=origin, text=text)
        self._messages.append(message)
        logger.debug(f"Appended {origin.value} message (#{len(self._messages)})")
        return message

    def set_pending_input(self, text: str) -> None:
        """Replace the draft text verbatim."""
        self._pending_input = text

    def set_loading(self, loading: bool) -> None:
        """Set the loading flag."""
        self._is_loading = loading

    def set_faqs(self, faqs: Iterable[FAQ]) -> None:
        """Replace the FAQ list wholesale."""
        self._faqs = list(faqs)
        logger.debug(f"FAQ list replaced ({len(self._faqs)} entries)")

    def snapshot(self) -> ConversationState:
        """Return an immutable copy of the current state."""
        return ConversationState(
            messages=tuple(self._messages),
            pending_input=self._pending_input,
            is_loading=self._is_loading,
            faqs=tuple(self._faqs),
        )
