"""Text-to-prompt stages: normalize, segment, filter, synthesize.

Every stage is a pure function over the previous stage's full output.
"""

from studyprompts.prompts.filters import MIN_CANDIDATE_LENGTH, filter_candidates
from studyprompts.prompts.normalizer import normalize_pages, normalize_text
from studyprompts.prompts.segmenter import split_sentences
from studyprompts.prompts.synthesizer import (
    EMPTY_STATE_MESSAGE,
    MAX_PROMPTS,
    synthesize_prompts,
)

__all__ = [
    "EMPTY_STATE_MESSAGE",
    "MAX_PROMPTS",
    "MIN_CANDIDATE_LENGTH",
    "filter_candidates",
    "normalize_pages",
    "normalize_text",
    "split_sentences",
    "synthesize_prompts",
]
