"""Length-based filtering of sentence candidates."""

from collections.abc import Iterable

# Segments of this length or shorter are treated as headers, page numbers, etc.
MIN_CANDIDATE_LENGTH = 30


def filter_candidates(
    candidates: Iterable[str], min_length: int = MIN_CANDIDATE_LENGTH
) -> list[str]:
    """Keep candidates strictly longer than ``min_length`` characters.

    Order is preserved and duplicates are kept.

    Raises:
        ValueError: If ``min_length`` is negative.
    """
    if min_length < 0:
        raise ValueError(f"min_length must be non-negative, got {min_length}")
    return [candidate for candidate in candidates if len(candidate) > min_length]
