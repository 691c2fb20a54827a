"""NiceGUI study page: upload a PDF, read its text, review the prompts."""

import logging

import httpx
from nicegui import events, ui

from studyprompts.config import get_settings
from studyprompts.ui.formatting import (
    error_text,
    question_lines,
    response_payload,
    upload_status,
)

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .raw-text {
        background: #f7f7f7;
        border-radius: 8px;
        white-space: pre-wrap;
        word-wrap: break-word;
    }
</style>
"""


async def post_document(name: str, content: bytes, content_type: str) -> httpx.Response:
    """Send a PDF to the /prompts endpoint."""
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.decode_timeout + 10) as client:
        return await client.post(
            f"{settings.api_base_url}/prompts",
            files={"pdf": (name, content, content_type or "application/pdf")},
        )


@ui.page("/")
def study_page() -> None:
    """Main study page."""
    ui.add_head_html(CUSTOM_CSS)

    status_label: ui.label
    questions_container: ui.column
    text_container: ui.column

    def render_questions(prompts: list[str], message: str | None) -> None:
        questions_container.clear()
        with questions_container:
            ui.label("Auto-Generated Questions").classes("text-lg font-semibold")
            if prompts:
                with ui.list().props("dense separator"):
                    for line in question_lines(prompts):
                        ui.item(line)
            else:
                ui.label(question_lines(prompts, message)[0]).classes("text-gray-500 italic")

    def render_text(text: str) -> None:
        text_container.clear()
        with text_container:
            ui.label("Extracted PDF Text").classes("text-lg font-semibold")
            ui.label(text).classes("raw-text w-full p-4 text-sm")

    def render_error(message: str) -> None:
        questions_container.clear()
        text_container.clear()
        status_label.set_text(message)
        status_label.classes(replace="text-sm text-red-600")
        ui.notify(message, type="negative")

    async def handle_upload(e: events.UploadEventArguments) -> None:
        status_label.set_text(f"Processing {e.name}...")
        status_label.classes(replace="text-sm text-gray-500")

        try:
            response = await post_document(e.name, e.content.read(), e.type)
        except httpx.RequestError as exc:
            logger.warning(f"Upload request failed: {exc}")
            render_error(error_text(None, str(exc)))
            return

        payload = response_payload(response)
        if response.status_code != 200 or payload is None:
            detail = payload.get("error") if payload else None
            render_error(error_text(response.status_code, detail))
            return

        status_label.set_text(upload_status(e.name, payload["pages"], len(payload["prompts"])))
        render_questions(payload["prompts"], payload.get("message"))
        render_text(payload["text"])

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container gap-4 pb-6"),
    ):
        with ui.row().classes("w-full header px-5 py-4 items-center rounded-t-xl"):
            ui.icon("quiz").classes("text-white text-3xl")
            ui.label("Study Prompts").classes("text-lg font-semibold text-white")

        with ui.column().classes("w-full px-5 gap-2"):
            ui.label("Upload PDF Document").classes("text-lg font-semibold")
            ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1).props(
                "accept=application/pdf"
            ).classes("w-full")
            status_label = ui.label("").classes("text-sm text-gray-500")

        questions_container = ui.column().classes("w-full px-5 gap-2")
        text_container = ui.column().classes("w-full px-5 gap-2")
