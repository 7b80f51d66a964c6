"""Knowledge base behind the demo backend.

Responsibilities:
    - Index uploaded documents in an agno/LanceDB vector store
    - Serve the FAQ catalogue (built-in or from ``FAQS_FILE``)
    - Answer chat questions with the closest document or FAQ passage
"""

from campus_chat.knowledge.faqs import DEFAULT_FAQS, load_faq_catalog
from campus_chat.knowledge.service import KnowledgeBase, get_knowledge_base

__all__ = ["DEFAULT_FAQS", "KnowledgeBase", "get_knowledge_base", "load_faq_catalog"]
