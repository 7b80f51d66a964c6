"""Composition of one chat widget instance."""

from nicegui import ui

from campus_chat.client.backend import BackendClient
from campus_chat.config import WidgetConfig, get_widget_config
from campus_chat.state.store import ConversationStore
from campus_chat.ui.controller import ChatController
from campus_chat.ui.engine import RenderEngine, View
from campus_chat.ui.view import CUSTOM_CSS, ChatView


class ChatWidget:
    """One widget instance: store, engine and controller wired together.

    The engine forwards bound events to the controller, and the controller
    asks the engine for a render after every visible state change.
    """

    def __init__(
        self,
        view: View | None = None,
        config: WidgetConfig | None = None,
        client: BackendClient | None = None,
    ) -> None:
        self.config = config or get_widget_config()
        self.store = ConversationStore()
        self.engine = RenderEngine(self.store, view, max_faqs=self.config.max_faq_shortcuts)
        self.controller = ChatController(
            self.store,
            client or BackendClient(self.config),
            render=self.engine.render,
            clear_upload=self.engine.clear_upload,
        )
        self.engine.connect(self.controller)

    async def start(self) -> None:
        """Load the FAQs; ends with the first render."""
        await self.controller.load_faqs()


async def mount_chat_widget(
    config: WidgetConfig, client: BackendClient | None = None
) -> ChatWidget:
    """Draw a started widget into the current NiceGUI page.

    Must be called from within a page function.
    """
    ui.add_head_html(CUSTOM_CSS)
    root = ui.element("div").classes("w-full max-w-6xl mx-auto bg-white rounded-lg shadow")
    widget = ChatWidget(ChatView(root, config.contact_email), config, client)
    await widget.start()
    return widget
