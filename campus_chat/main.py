"""Entry point serving the chat widget and its demo backend on one port.

The NiceGUI page and the FastAPI routes share a uvicorn server; the
widget reaches the routes through ``WidgetConfig.api_base_url``, which
defaults to this server.
"""

import logging
import sys

from fastapi import FastAPI

from campus_chat.config import ServerConfig, get_server_config

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Log to stdout at ``level``, keeping httpx request lines quiet."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_app(config: ServerConfig) -> FastAPI:
    """Create the demo backend with the chat page mounted on it."""
    from nicegui import ui

    from campus_chat.api.app import create_app
    from campus_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    ui.run_with(
        app,
        title="College Inquiry AI",
        favicon="🎓",
        storage_secret=config.storage_secret,
    )
    return app


def main() -> None:
    """Serve the widget at ``/`` and the API under ``/api``."""
    import uvicorn

    config = get_server_config()
    configure_logging(config.log_level)

    app = build_app(config)
    logger.info(f"Chat widget available at {config.local_url}/")

    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
