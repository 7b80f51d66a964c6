"""Knowledge base for the demo backend.

Uploaded documents and the FAQ catalogue share one agno ``Knowledge``
backed by LanceDB, so a question is answered by the closest passage
whichever source it came from. agno handles chunking and embedding.
"""

import asyncio
import logging

from agno.knowledge.embedder.openai import OpenAIEmbedder
from agno.knowledge.knowledge import Knowledge
from agno.vectordb.lancedb import LanceDb

from campus_chat.knowledge.config import KnowledgeConfig, get_knowledge_config
from campus_chat.knowledge.faqs import load_faq_catalog
from campus_chat.models.schemas import FAQ

logger = logging.getLogger(__name__)

FAQ_SOURCE = "faq"


def create_knowledge(config: KnowledgeConfig) -> Knowledge:
    """Create the LanceDB-backed agno knowledge store.

    Args:
        config: Embedding provider and storage settings.

    Returns:
        Configured Knowledge instance.
    """
    config.knowledge_dir.mkdir(parents=True, exist_ok=True)

    embedder = OpenAIEmbedder(
        id=config.embedding_model,
        api_key=config.api_key,
        base_url=config.base_url,
    )
    vector_db = LanceDb(
        uri=str(config.knowledge_dir),
        table_name=config.table_name,
        embedder=embedder,
    )
    return Knowledge(vector_db=vector_db)


class KnowledgeBase:
    """Answers questions from uploaded documents and the FAQ catalogue.

    FAQs are indexed on first use; each FAQ passage carries its answer in
    the metadata so a FAQ hit returns just the answer text.
    """

    def __init__(self, knowledge: Knowledge, faqs: list[FAQ] | None = None) -> None:
        self._knowledge = knowledge
        self._faqs: list[FAQ] = list(faqs or [])
        self._faqs_indexed = False
        self._index_lock = asyncio.Lock()

    @property
    def faqs(self) -> list[FAQ]:
        return list(self._faqs)

    async def add_document(
        self,
        name: str,
        content: str,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Add a document to the knowledge base.

        Args:
            name: Document name (the uploaded filename).
            content: Extracted text content.
            metadata: Optional metadata (author, title, etc.).
        """
        if not content.strip():
            logger.warning(f"Skipping empty document: {name}")
            return

        await self._knowledge.add_content_async(
            name=name,
            text_content=content,
            metadata={**(metadata or {}), "source": "upload"},
        )
        logger.info(f"Added document to knowledge base: {name}")

    async def index_faqs(self) -> None:
        """Index the FAQ catalogue once."""
        async with self._index_lock:
            if self._faqs_indexed:
                return
            for i, faq in enumerate(self._faqs):
                await self._knowledge.add_content_async(
                    name=f"faq-{i}",
                    text_content=f"{faq.question}\n{faq.answer}",
                    metadata={"source": FAQ_SOURCE, "answer": faq.answer},
                )
            self._faqs_indexed = True
            logger.info(f"Indexed {len(self._faqs)} FAQs")

    async def answer(self, question: str) -> str | None:
        """Return the passage closest to ``question``, or None if nothing is indexed."""
        await self.index_faqs()

        results = await self._knowledge.async_search(query=question, max_results=1)
        if not results:
            return None

        best = results[0]
        meta = best.meta_data or {}
        if meta.get("source") == FAQ_SOURCE and meta.get("answer"):
            return meta["answer"]
        return best.content


# Module-level singleton instance
_knowledge_base: KnowledgeBase | None = None


def get_knowledge_base() -> KnowledgeBase:
    """Get or create the global knowledge base.

    Returns:
        The KnowledgeBase instance, seeded with the FAQ catalogue.

    Raises:
        ValueError: If the knowledge store configuration is invalid.
    """
    global _knowledge_base
    if _knowledge_base is None:
        _knowledge_base = KnowledgeBase(
            create_knowledge(get_knowledge_config()), load_faq_catalog()
        )
    return _knowledge_base
