"""FastAPI application factory for the demo backend."""

import logging

from fastapi import FastAPI

from campus_chat.api.chat import router as chat_router
from campus_chat.api.routes import router as knowledge_router
from campus_chat.knowledge.service import KnowledgeBase, get_knowledge_base

logger = logging.getLogger(__name__)


def create_app(knowledge_base: KnowledgeBase | None = None) -> FastAPI:
    """Create the demo backend.

    The widget's HTTP client runs on the server, next to these routes, so
    no CORS middleware is installed.

    Args:
        knowledge_base: Knowledge base the routes answer from. Defaults to
            the module singleton.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Campus Chat API",
        description=(
            "Demo backend for the college enquiry chat widget. Answers questions "
            "from uploaded PDF/TXT/CSV knowledge and a FAQ catalogue."
        ),
        version="0.1.0",
    )
    application.state.knowledge_base = knowledge_base or get_knowledge_base()
    logger.info(f"Knowledge base ready with {len(application.state.knowledge_base.faqs)} FAQs")

    application.include_router(chat_router)
    application.include_router(knowledge_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "campus-chat"}

    return application
