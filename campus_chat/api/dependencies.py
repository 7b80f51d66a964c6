"""Request dependencies shared by the API routers."""

from typing import Annotated

from fastapi import Depends, Request

from campus_chat.knowledge.service import KnowledgeBase


def knowledge_base(request: Request) -> KnowledgeBase:
    """Return the knowledge base the application was created with."""
    return request.app.state.knowledge_base


KnowledgeBaseDep = Annotated[KnowledgeBase, Depends(knowledge_base)]
