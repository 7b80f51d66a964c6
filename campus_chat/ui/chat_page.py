"""NiceGUI page hosting the chat widget."""

import logging

from nicegui import ui

from campus_chat.config import get_widget_config
from campus_chat.ui.widget import mount_chat_widget

logger = logging.getLogger(__name__)


@ui.page("/")
async def chat_page() -> None:
    """Main chat page."""
    config = get_widget_config()
    logger.debug(f"Creating chat widget, backend at {config.api_base_url}")
    await mount_chat_widget(config)
