"""Unit tests for study page display helpers."""

import httpx

from studyprompts.prompts.synthesizer import EMPTY_STATE_MESSAGE
from studyprompts.ui.formatting import (
    error_text,
    question_lines,
    response_payload,
    upload_status,
)


class TestQuestionLines:
    def test_prompts_shown_as_is(self) -> None:
        prompts = ['Q1: What does this mean? → "Something?"']

        assert question_lines(prompts) == prompts

    def test_empty_state_message(self) -> None:
        assert question_lines([]) == [EMPTY_STATE_MESSAGE]

    def test_server_message_preferred(self) -> None:
        assert question_lines([], "Nothing here") == ["Nothing here"]


class TestStatusText:
    def test_upload_status_plurals(self) -> None:
        assert upload_status("notes.pdf", 1, 1) == "notes.pdf: 1 page, 1 question"
        assert upload_status("notes.pdf", 3, 0) == "notes.pdf: 3 pages, 0 questions"

    def test_error_text_differs_from_empty_state(self) -> None:
        message = error_text(500, "Failed to parse PDF")

        assert message == "Error 500: Failed to parse PDF"
        assert message != EMPTY_STATE_MESSAGE

    def test_connection_error(self) -> None:
        assert error_text(None, "refused") == "Connection failed: refused"
        assert error_text(None, None) == "Connection failed"


class TestResponsePayload:
    def test_json_error_body(self) -> None:
        response = httpx.Response(500, json={"error": "Failed to parse PDF"})

        assert response_payload(response) == {"error": "Failed to parse PDF"}

    def test_html_error_page_gives_none(self) -> None:
        """A proxy error page still yields a status-only error message."""
        response = httpx.Response(502, text="<html><body>Bad Gateway</body></html>")

        payload = response_payload(response)

        assert payload is None
        assert error_text(response.status_code, None) == "Error 502"

    def test_non_object_json_gives_none(self) -> None:
        assert response_payload(httpx.Response(200, json=["not", "an", "object"])) is None
