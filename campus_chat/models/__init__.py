"""Pydantic models for widget state and backend payloads.

Provides type safety and validation at every HTTP boundary.

Models:
    - Origin: Message author (user or bot)
    - Message: Individual transcript entry
    - FAQ: Question/answer pair (wire keys ``q``/``a``)
    - ChatRequest: Chat endpoint request payload
    - ChatReply: Chat endpoint response
    - KnowledgeUploadReply: Upload acknowledgement read by the widget
    - KnowledgeUploadResult: Upload acknowledgement sent by the demo backend
"""

from campus_chat.models.schemas import (
    FAQ,
    ChatReply,
    ChatRequest,
    KnowledgeUploadReply,
    KnowledgeUploadResult,
    Message,
    Origin,
)

__all__ = [
    "FAQ",
    "ChatReply",
    "ChatRequest",
    "KnowledgeUploadReply",
    "KnowledgeUploadResult",
    "Message",
    "Origin",
]
