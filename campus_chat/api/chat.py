"""Chat and FAQ endpoints."""

import logging

from fastapi import APIRouter

from campus_chat.api.dependencies import KnowledgeBaseDep
from campus_chat.models.schemas import FAQ, ChatReply, ChatRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post("/chat", response_model=ChatReply)
async def chat(request: ChatRequest, knowledge_base: KnowledgeBaseDep) -> ChatReply:
    """Answer a question with the closest uploaded or FAQ passage.

    Returns:
        ChatReply whose ``reply`` is None when nothing is indexed yet.
    """
    reply = await knowledge_base.answer(request.message)
    if reply is None:
        logger.info(f"No answer found for: {request.message!r}")
    return ChatReply(reply=reply)


@router.get("/faqs", response_model=list[FAQ], response_model_by_alias=True)
async def list_faqs(knowledge_base: KnowledgeBaseDep) -> list[FAQ]:
    """List the FAQ catalogue as ``[{"q": ..., "a": ...}]``."""
    return knowledge_base.faqs
