"""Pure projection of conversation state into a renderable description.

``project`` is deterministic: the same state always yields the same
projection. The view turns a projection into NiceGUI elements.
"""

from pydantic import BaseModel, ConfigDict

from campus_chat.models.schemas import Origin
from campus_chat.state.store import ConversationState

LOADING_TEXT = "Thinking..."

SUGGESTIONS: tuple[str, ...] = (
    "Admission deadlines",
    "Courses offered",
    "Scholarships",
    "Hostel details",
    "Placement statistics",
)

CATEGORIES: tuple[str, ...] = (
    "Admissions",
    "Courses",
    "Fees",
    "Hostel",
    "Placements",
    "Scholarship",
)

MAX_FAQ_SHORTCUTS = 5


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class MessageBlock(_Frozen):
    """One transcript bubble.

    Attributes:
        origin: Author; decides alignment and colors only.
        text: Verbatim text.
    """

    origin: Origin
    text: str

    @property
    def is_user(self) -> bool:
        return self.origin is Origin.USER


class FaqShortcut(_Frozen):
    """A clickable FAQ card. Activating it sends ``question``."""

    question: str
    answer_preview: str


class Projection(_Frozen):
    """Everything the view needs to rebuild the widget.

    Attributes:
        messages: Bubbles in transcript order.
        loading_indicator: Pending text shown after the last bubble, if any.
        input_value: Value of the text input (always the pending input).
        input_disabled: Whether the input is disabled.
        submit_disabled: Whether the send button is disabled.
        upload_disabled: Whether the knowledge upload control is disabled.
        faq_shortcuts: FAQ cards, at most ``MAX_FAQ_SHORTCUTS``.
        suggestions: Fixed quick-suggestion buttons.
        categories: Fixed category buttons.
    """

    messages: tuple[MessageBlock, ...]
    loading_indicator: str | None
    input_value: str
    input_disabled: bool
    submit_disabled: bool
    upload_disabled: bool
    faq_shortcuts: tuple[FaqShortcut, ...]
    suggestions: tuple[str, ...] = SUGGESTIONS
    categories: tuple[str, ...] = CATEGORIES


def project(state: ConversationState, max_faqs: int = MAX_FAQ_SHORTCUTS) -> Projection:
    """Project a state snapshot into a renderable description.

    Args:
        state: Snapshot to project.
        max_faqs: Maximum number of FAQs surfaced as shortcuts.

    Returns:
        The projection for ``state``.
    """
    loading = state.is_loading
    return Projection(
        messages=tuple(MessageBlock(origin=m.origin, text=m.text) for m in state.messages),
        loading_indicator=LOADING_TEXT if loading else None,
        input_value=state.pending_input,
        input_disabled=loading,
        submit_disabled=loading,
        upload_disabled=loading,
        faq_shortcuts=tuple(
            FaqShortcut(question=faq.question, answer_preview=faq.answer)
            for faq in state.faqs[:max_faqs]
        ),
    )
