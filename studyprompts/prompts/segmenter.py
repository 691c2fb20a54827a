"""Sentence segmentation on literal terminator delimiters.

A delimiter is ". ", "? " or "! ", or a terminator at the very end of the
text. This is a heuristic: abbreviations such as "Dr. Smith" are split like
any other sentence end, and runs like "?! " only split on their last two
characters.
"""

import re

# Alternation is tried left to right at each position
SENTENCE_DELIMITER = re.compile(r"\. |\? |! |[.?!]\Z")


def split_sentences(text: str) -> list[str]:
    """Split normalized text into candidate sentences.

    Delimiters are consumed and not kept in any returned piece.

    Args:
        text: Normalized text.

    Returns:
        Candidates in original order; an empty list for empty input.
    """
    if not text:
        return []

    pieces = SENTENCE_DELIMITER.split(text)
    # A terminator at the end of the text leaves an empty trailing piece
    if len(pieces) > 1 and not pieces[-1]:
        pieces.pop()
    return pieces
