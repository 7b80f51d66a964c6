"""Knowledge store configuration with environment variable loading.

Pydantic-based configuration for the agno knowledge base behind the demo
backend. Embeddings go through OpenAI or any OpenAI-compatible API.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

_DEFAULT_KNOWLEDGE_DIR = Path(__file__).parent.parent.parent / "data" / "knowledge"


class KnowledgeConfig(BaseModel):
    """Configuration for the vector knowledge store.

    Attributes:
        api_key: API key for the embedding provider.
        base_url: API base URL (None for OpenAI default).
        embedding_model: Embedding model identifier.
        knowledge_dir: Directory holding the LanceDB tables.
        table_name: LanceDB table for documents and FAQs.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="API key for the embedding provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    embedding_model: str = Field(
        default_factory=lambda: os.getenv("EMBEDDING_MODEL", "text-embedding-3-small"),
        description="Embedding model to use",
    )
    knowledge_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("KNOWLEDGE_DIR", str(_DEFAULT_KNOWLEDGE_DIR))),
        description="LanceDB storage directory",
    )
    table_name: str = Field(default="campus_knowledge", description="LanceDB table name")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set LLM_API_KEY or OPENAI_API_KEY in .env")
        return v.strip()


def get_knowledge_config() -> KnowledgeConfig:
    """Create knowledge store configuration from environment.

    Returns:
        Configured KnowledgeConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return KnowledgeConfig()
