"""Document-to-prompt pipeline.

Extractor -> Normalizer -> Segmenter -> Filter -> Synthesizer, strictly in
sequence. Each stage finishes before the next one starts and nothing is
shared between runs. The async entry point moves the whole run to a worker
thread so a large decode does not block the event loop.
"""

import asyncio
import logging

from pydantic import BaseModel, Field

from studyprompts.config import ExtractorConfig
from studyprompts.errors import DecodeError
from studyprompts.parsing.pdf_parser import PageTextExtractor, join_pages
from studyprompts.prompts.filters import filter_candidates
from studyprompts.prompts.normalizer import normalize_text
from studyprompts.prompts.segmenter import split_sentences
from studyprompts.prompts.synthesizer import synthesize_prompts

logger = logging.getLogger(__name__)


class PipelineResult(BaseModel):
    """Output of one pipeline run.

    Attributes:
        document_text: Page texts, each followed by a newline, before cleanup.
        prompts: Generated study prompts, at most five.
        page_count: Number of pages in the document.
    """

    model_config = {"frozen": True}

    document_text: str
    prompts: list[str] = Field(default_factory=list)
    page_count: int = Field(ge=0)

    @property
    def is_empty(self) -> bool:
        """True when the run succeeded but produced no prompts."""
        return not self.prompts


def generate_prompts(document_text: str) -> list[str]:
    """Run the text stages over document text."""
    normalized = normalize_text(document_text)
    candidates = split_sentences(normalized)
    return synthesize_prompts(filter_candidates(candidates))


def run_pipeline(data: bytes, config: ExtractorConfig | None = None) -> PipelineResult:
    """Decode a PDF and derive study prompts from its text.

    Args:
        data: Raw bytes of the PDF file.
        config: Decoder settings for this run.

    Returns:
        PipelineResult with the document text and prompts. Zero-page or
        text-free documents give empty values, not an error.

    Raises:
        DecodeError: If the buffer is not a readable PDF.
    """
    page_texts = PageTextExtractor(config).extract(data)
    document_text = join_pages(page_texts)
    prompts = generate_prompts(document_text)

    logger.info(f"Generated {len(prompts)} prompt(s) from {len(page_texts)} page(s)")

    return PipelineResult(
        document_text=document_text,
        prompts=prompts,
        page_count=len(page_texts),
    )


async def run_pipeline_async(
    data: bytes,
    config: ExtractorConfig | None = None,
    timeout: float | None = None,
) -> PipelineResult:
    """Run the pipeline in a worker thread.

    Args:
        data: Raw bytes of the PDF file.
        config: Decoder settings for this run.
        timeout: Seconds to wait for the run; None waits indefinitely.

    Returns:
        PipelineResult for the document.

    Raises:
        DecodeError: If decoding fails or does not finish within ``timeout``.
    """
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(run_pipeline, data, config),
            timeout=timeout,
        )
    except TimeoutError as e:
        # The worker thread cannot be interrupted; its result is discarded
        raise DecodeError(f"PDF decoding timed out after {timeout}s") from e
