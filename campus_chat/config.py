"""Server and widget configuration with environment variable loading.

Pydantic-based configuration for the uvicorn server, the chat widget and
the widget's backend client. The widget and the demo backend share one
server, so the widget's default backend URL follows ``PORT``.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_PORT = 8080


def _port() -> int:
    return int(os.getenv("PORT", str(DEFAULT_PORT)))


class ServerConfig(BaseModel):
    """Configuration for the server hosting the widget and the demo backend.

    Attributes:
        host: Interface to bind.
        port: Port serving both the page and the API routes.
        log_level: Log level for the application and uvicorn.
        storage_secret: Secret for NiceGUI's per-user storage.
    """

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=_port, ge=1, le=65535)
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    storage_secret: str = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET", "campus-chat-secret")
    )

    @property
    def local_url(self) -> str:
        """URL the server answers on from the same machine."""
        return f"http://localhost:{self.port}"


class WidgetConfig(BaseModel):
    """Configuration for the chat widget.

    Attributes:
        api_base_url: Base URL of the backend serving the chat/upload/FAQ endpoints.
        chat_path: Path of the chat endpoint.
        upload_path: Path of the knowledge upload endpoint.
        faqs_path: Path of the FAQ listing endpoint.
        request_timeout: Per-request timeout in seconds.
        contact_email: Human contact address shown in fallbacks and the footer.
        max_faq_shortcuts: How many FAQs are surfaced as shortcuts.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL") or f"http://localhost:{_port()}",
        description="Backend base URL (defaults to this server)",
    )
    chat_path: str = Field(default="/api/chat", description="Chat endpoint path")
    upload_path: str = Field(
        default="/api/upload-knowledge",
        description="Knowledge upload endpoint path",
    )
    faqs_path: str = Field(default="/api/faqs", description="FAQ listing endpoint path")
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT", "30")),
        ge=1.0,
        le=300.0,
        description="Timeout in seconds for backend requests",
    )
    contact_email: str = Field(
        default_factory=lambda: os.getenv("CONTACT_EMAIL", "admissions@college.edu"),
        description="Admissions contact shown to users",
    )
    max_faq_shortcuts: int = Field(
        default=5,
        ge=0,
        description="Number of FAQs rendered as shortcuts",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so endpoint paths join cleanly."""
        return v.strip().rstrip("/")

    @field_validator("contact_email")
    @classmethod
    def validate_contact_email(cls, v: str) -> str:
        """Validate that the contact address looks like an email."""
        v = v.strip()
        if "@" not in v:
            raise ValueError("CONTACT_EMAIL must be an email address")
        return v


def get_server_config() -> ServerConfig:
    """Create server configuration from environment.

    Returns:
        Configured ServerConfig instance.
    """
    return ServerConfig()


def get_widget_config() -> WidgetConfig:
    """Create widget configuration from environment.

    Returns:
        Configured WidgetConfig instance.

    Raises:
        ValueError: If an environment value is invalid.
    """
    return WidgetConfig()
