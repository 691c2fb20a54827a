"""Text normalization: restrict the character set and canonicalize spacing.

The passes run in a fixed order. Newlines are first folded into generic
whitespace and then collapsed, so every page and line boundary ends up as a
single space.
"""

import re
from collections.abc import Sequence

from studyprompts.parsing.pdf_parser import join_pages

# Anything outside letters, digits, . , ! ? space and newline
DISALLOWED_CHARS = re.compile(r"[^a-zA-Z0-9.,!? \n]")
WHITESPACE_RUN = re.compile(r"\s+")
NEWLINE_RUN = re.compile(r"\n+")


def normalize_text(text: str) -> str:
    """Reduce text to the allow-listed characters with single spaces.

    Args:
        text: Document text, possibly spanning several pages.

    Returns:
        Text with no newlines, no double spaces, and no leading or trailing
        whitespace. Empty input gives an empty string.
    """
    cleaned = DISALLOWED_CHARS.sub(" ", text)
    cleaned = WHITESPACE_RUN.sub(" ", cleaned)
    cleaned = NEWLINE_RUN.sub(" ", cleaned)
    return cleaned.strip()


def normalize_pages(page_texts: Sequence[str]) -> str:
    """Join page texts into document text and normalize the result."""
    return normalize_text(join_pages(page_texts))
