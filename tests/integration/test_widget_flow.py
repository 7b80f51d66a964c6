"""End-to-end tests of the widget loop against the demo backend.

The widget talks HTTP to the real FastAPI app through ASGITransport; only
the NiceGUI view is replaced by a recording view.
"""

import pytest
import pytest_check as check

from campus_chat.client.backend import BackendClient
from campus_chat.config import WidgetConfig
from campus_chat.knowledge.faqs import DEFAULT_FAQS
from campus_chat.ui.controller import NOT_FOUND_REPLY, upload_confirmation
from campus_chat.ui.engine import KnowledgeFile
from campus_chat.ui.widget import ChatWidget
from tests.conftest import RecordingView


@pytest.fixture
async def widget(
    recording_view: RecordingView, widget_config: WidgetConfig, asgi_backend: BackendClient
) -> ChatWidget:
    widget = ChatWidget(recording_view, widget_config, asgi_backend)
    await widget.start()
    return widget


def _last_text(widget: ChatWidget) -> str:
    return widget.store.messages[-1].text


class TestWidgetFlow:
    async def test_startup_loads_server_faqs(
        self, widget: ChatWidget, recording_view: RecordingView
    ) -> None:
        check.equal(widget.store.faqs, DEFAULT_FAQS)
        check.equal(
            [s.question for s in recording_view.latest.faq_shortcuts],
            [f.question for f in DEFAULT_FAQS[:5]],
        )

    async def test_category_shortcut_answers_from_faqs(
        self, widget: ChatWidget, recording_view: RecordingView
    ) -> None:
        await recording_view.latest_bindings.on_shortcut("Hostel")

        check.equal(widget.store.messages[-2].text, "Hostel")
        check.equal(_last_text(widget), DEFAULT_FAQS[4].answer)
        check.is_false(recording_view.latest.input_disabled)

    async def test_unknown_question_shows_not_found(
        self, widget: ChatWidget, recording_view: RecordingView
    ) -> None:
        bindings = recording_view.latest_bindings
        bindings.on_input("quantum chromodynamics")

        await bindings.on_submit()

        check.equal(_last_text(widget), NOT_FOUND_REPLY)
        check.equal(recording_view.latest.input_value, "")

    async def test_upload_then_ask(
        self, widget: ChatWidget, recording_view: RecordingView
    ) -> None:
        file = KnowledgeFile(
            name="transcript.csv",
            content=b"student,program,status\nAsha,B.Tech,admitted\n",
            content_type="text/csv",
        )

        await recording_view.latest_bindings.on_upload(file)

        check.equal(_last_text(widget), upload_confirmation("transcript.csv"))
        check.equal(recording_view.upload_resets, 1)

        await widget.controller.send_message("Asha admitted")

        check.is_in("admitted", _last_text(widget))

    async def test_rejected_upload_shows_failure(self, widget: ChatWidget) -> None:
        await widget.controller.handle_upload(KnowledgeFile(name="photo.jpg", content=b"\xff\xd8"))

        check.equal(_last_text(widget), "Upload failed. Try again or contact the admin.")
        check.is_false(widget.store.is_loading)

    async def test_frames_never_stay_loading(
        self, widget: ChatWidget, recording_view: RecordingView
    ) -> None:
        await widget.controller.send_message("Tell me about hostels")
        await widget.controller.handle_upload(KnowledgeFile(name="a.txt", content=b"hello"))
        await widget.controller.send_message("What is the application deadline?")

        check.is_none(recording_view.latest.loading_indicator)
        check.is_false(widget.store.is_loading)
        loading_flags = [f.loading_indicator is not None for f in recording_view.frames]
        # every loading frame is immediately followed by a settled one
        for current, following in zip(loading_flags, loading_flags[1:]):
            if current:
                check.is_false(following)
