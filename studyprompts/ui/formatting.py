"""Display decisions for the study page, kept free of UI widgets."""

from collections.abc import Sequence

import httpx

from studyprompts.prompts.synthesizer import EMPTY_STATE_MESSAGE


def question_lines(prompts: Sequence[str], message: str | None = None) -> list[str]:
    """Lines for the generated-questions panel.

    An empty prompt list shows the empty-state message instead of nothing.
    """
    if prompts:
        return list(prompts)
    return [message or EMPTY_STATE_MESSAGE]


def upload_status(filename: str, pages: int, prompt_count: int) -> str:
    page_word = "page" if pages == 1 else "pages"
    question_word = "question" if prompt_count == 1 else "questions"
    return f"{filename}: {pages} {page_word}, {prompt_count} {question_word}"


def error_text(status_code: int | None, detail: str | None) -> str:
    """Message shown when an upload fails."""
    if status_code is None:
        return f"Connection failed: {detail}" if detail else "Connection failed"
    if detail:
        return f"Error {status_code}: {detail}"
    return f"Error {status_code}"


def response_payload(response: httpx.Response) -> dict | None:
    """Decoded JSON object from an API response, or None for other bodies."""
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None
