"""Templated prompt synthesis from filtered sentences."""

from collections.abc import Sequence

MAX_PROMPTS = 5
PROMPT_TEMPLATE = 'Q{number}: What does this mean? → "{sentence}?"'
EMPTY_STATE_MESSAGE = "No valid content found to generate questions."


def format_prompt(number: int, sentence: str) -> str:
    """Render one prompt. A "?" is always appended to the trimmed sentence."""
    return PROMPT_TEMPLATE.format(number=number, sentence=sentence.strip())


def synthesize_prompts(candidates: Sequence[str], limit: int = MAX_PROMPTS) -> list[str]:
    """Wrap the first ``limit`` candidates into numbered prompts.

    Args:
        candidates: Filtered sentences in document order.
        limit: Maximum number of prompts to produce.

    Returns:
        Prompts numbered from 1. An empty list means the document had no
        usable content; callers show EMPTY_STATE_MESSAGE for it.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    return [
        format_prompt(index + 1, sentence)
        for index, sentence in enumerate(candidates[:limit])
    ]
