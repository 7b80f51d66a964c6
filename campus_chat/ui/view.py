"""NiceGUI view that materializes projections.

Each ``build`` clears the root element and recreates every child, binding
the handlers of the current render as the elements are created.
"""

import logging
from functools import partial

from nicegui import events, ui

from campus_chat.ui.engine import Bindings, KnowledgeFile
from campus_chat.ui.projection import MessageBlock, Projection

logger = logging.getLogger(__name__)

ACCEPTED_UPLOADS = ".pdf,.txt,.csv"

CUSTOM_CSS = """
<style>
    body { background: #f3f4f6; }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 12px 12px 4px 12px;
    }

    .message-bot {
        background: white;
        color: #1f2937;
        border: 1px solid #e5e7eb;
        border-radius: 12px 12px 12px 4px;
    }

    .faq-item { cursor: pointer; }
    .faq-item:hover { background: #eff6ff; }
</style>
"""


class ChatView:
    """Draws projections into a NiceGUI root element.

    Args:
        root: Container the widget is drawn into. When None, or once the
            element has been deleted, ``build`` does nothing.
        contact_email: Address behind the "Contact human" link.
    """

    def __init__(self, root: ui.element | None, contact_email: str) -> None:
        self._root = root
        self._contact_email = contact_email
        self._upload: ui.upload | None = None

    @property
    def is_mounted(self) -> bool:
        return self._root is not None and not self._root.is_deleted

    def build(self, projection: Projection, bindings: Bindings) -> None:
        if not self.is_mounted:
            return

        self._root.clear()
        with self._root, ui.row().classes("w-full gap-0 no-wrap items-stretch"):
            scroll_area = self._build_chat_column(projection, bindings)
            self._build_side_panel(projection, bindings)
            # Scroll extent is only known once the new bubbles are laid out.
            ui.timer(0, lambda: scroll_area.scroll_to(percent=1.0), once=True)

    def clear_upload(self) -> None:
        if self._upload is not None and not self._upload.is_deleted:
            self._upload.reset()

    def _build_chat_column(self, projection: Projection, bindings: Bindings) -> ui.scroll_area:
        with ui.column().classes("w-2/3 p-6 gap-4").style("height: 80vh"):
            with ui.row().classes("w-full items-center justify-between"):
                with ui.column().classes("gap-0"):
                    ui.label("College Inquiry AI").classes("text-2xl font-semibold")
                    ui.label(
                        "Ask about admissions, courses, fees, placements, hostels and more."
                    ).classes("text-sm text-gray-500")
                ui.label("Prototype · Demo").classes("text-xs text-gray-400")

            with ui.scroll_area().classes(
                "flex-grow w-full border rounded-lg bg-gray-50"
            ) as scroll_area:
                with ui.column().classes("w-full p-4 gap-4"):
                    for block in projection.messages:
                        self._render_message(block)
                    if projection.loading_indicator:
                        ui.label(projection.loading_indicator).classes(
                            "text-sm text-gray-500 p-3"
                        )

            with ui.row().classes("w-full gap-3 items-center no-wrap"):
                chat_input = (
                    ui.input(
                        placeholder="Type your question (e.g. 'How do I apply for B.Tech?')",
                        value=projection.input_value,
                        on_change=lambda e: bindings.on_input(e.value or ""),
                    )
                    .props("outlined dense")
                    .classes("flex-grow")
                    .mark("chat-input")
                    .on("keydown.enter", bindings.on_submit)
                )
                send_btn = (
                    ui.button("Send", on_click=bindings.on_submit).props("unelevated").mark("send")
                )
                if projection.input_disabled:
                    chat_input.disable()
                if projection.submit_disabled:
                    send_btn.disable()

            ui.label("Quick suggestions:").classes("text-sm text-gray-600")
            with ui.row().classes("gap-2 flex-wrap"):
                for text in projection.suggestions:
                    ui.button(text, on_click=partial(bindings.on_shortcut, text)).props(
                        "outline rounded dense no-caps"
                    ).classes("text-sm")

            with ui.row().classes(
                "w-full border-t pt-3 items-center justify-between text-xs text-gray-500"
            ):
                ui.label("Upload knowledge base (PDF/CSV) to improve answers.")
                with ui.row().classes("items-center gap-2"):
                    self._upload = self._build_upload(projection, bindings)
                    ui.link("Contact human", f"mailto:{self._contact_email}").classes(
                        "text-blue-600"
                    )
        return scroll_area

    def _build_upload(self, projection: Projection, bindings: Bindings) -> ui.upload:
        async def on_upload(e: events.UploadEventArguments) -> None:
            content = await e.file.read()
            await bindings.on_upload(
                KnowledgeFile(name=e.file.name, content=content, content_type=e.file.content_type)
            )

        upload = (
            ui.upload(label="Upload", on_upload=on_upload, auto_upload=True, max_files=1)
            .props(f'accept="{ACCEPTED_UPLOADS}" flat dense')
            .classes("w-48")
            .mark("knowledge-upload")
        )
        if projection.upload_disabled:
            upload.disable()
        return upload

    def _build_side_panel(self, projection: Projection, bindings: Bindings) -> None:
        with ui.column().classes("w-1/3 p-6 gap-4 border-l bg-gray-100").style(
            "height: 80vh; overflow-y: auto"
        ):
            ui.label("Popular FAQs").classes("font-semibold")
            with ui.column().classes("w-full gap-2"):
                for faq in projection.faq_shortcuts:
                    with (
                        ui.card()
                        .classes("faq-item w-full p-2 gap-0")
                        .mark("faq-card")
                        .on("click", partial(bindings.on_shortcut, faq.question))
                    ):
                        ui.label(faq.question).classes("text-sm font-medium")
                        ui.label(faq.answer_preview).classes("text-xs text-gray-500 truncate w-full")

            ui.label("Ask by category").classes("font-semibold")
            with ui.grid(columns=2).classes("w-full gap-2"):
                for text in projection.categories:
                    ui.button(text, on_click=partial(bindings.on_shortcut, text)).props(
                        "flat no-caps color=dark"
                    ).classes("bg-white text-sm")

            ui.label("Settings").classes("font-semibold")
            with ui.column().classes("gap-1 text-sm text-gray-600"):
                ui.markdown("Model: **Local LLM / OpenAI**")
                ui.markdown("Language: **English**")

            ui.label(
                "Privacy: Conversations are logged for quality and to improve answers. "
                "Do not share sensitive personal data here."
            ).classes("text-xs text-gray-500")

    @staticmethod
    def _render_message(block: MessageBlock) -> None:
        align = "justify-end" if block.is_user else "justify-start"
        bubble = "message-user" if block.is_user else "message-bot"
        with ui.row().classes(f"w-full {align}"):
            # Plain label: transcript text is never interpreted as markup.
            ui.label(block.text).classes(f"max-w-[70%] p-3 shadow-sm whitespace-pre-wrap {bubble}")
