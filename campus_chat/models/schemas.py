from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Origin(str, Enum):
    """Who authored a transcript message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single entry of the conversation transcript.

    Attributes:
        origin: The speaker (user or bot).
        text: The message text, shown verbatim.
    """

    model_config = ConfigDict(frozen=True)

    origin: Origin
    text: str


class FAQ(BaseModel):
    """A frequently asked question with its canned answer.

    The wire form uses the short keys ``q`` and ``a``.

    Attributes:
        question: The question text, matched against user input.
        answer: The answer returned without contacting the backend.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str = Field(..., alias="q")
    answer: str = Field(..., alias="a")


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's question.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatReply(BaseModel):
    """Response from the chat endpoint.

    Attributes:
        reply: The answer text, or None when nothing relevant was found.
    """

    reply: str | None = None


class KnowledgeUploadReply(BaseModel):
    """Acknowledgement the widget reads after a knowledge upload.

    Only the stored filename is used; any other field the server sends is
    ignored.

    Attributes:
        filename: Name the server stored the document under.
    """

    filename: str | None = None


class KnowledgeUploadResult(KnowledgeUploadReply):
    """Upload acknowledgement returned by the demo backend.

    Attributes:
        kind: Detected document type (pdf, txt or csv).
        sections: Pages, rows or paragraphs the text was extracted from.
    """

    filename: str
    kind: str
    sections: int = Field(..., ge=0)
