"""PDF upload endpoints.

Handles the multipart upload, media type and size validation, and runs the
pipeline on the received bytes.
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from studyprompts.config import AppSettings, get_settings
from studyprompts.errors import DecodeError, InputTypeError
from studyprompts.models.schemas import ErrorResponse, PromptsResponse, TextResponse
from studyprompts.pipeline import PipelineResult, run_pipeline_async
from studyprompts.prompts.synthesizer import EMPTY_STATE_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])

PDF_MEDIA_TYPES = frozenset({"application/pdf", "application/x-pdf"})

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing file or not a PDF"},
    413: {"model": ErrorResponse, "description": "File exceeds the size limit"},
    500: {"model": ErrorResponse, "description": "PDF could not be decoded"},
}


def _validate_media_type(file: UploadFile) -> str:
    """Check that the upload is declared as a PDF.

    Accepts a PDF content type, or a generic one with a .pdf filename.

    Returns:
        The uploaded filename (may be empty).

    Raises:
        InputTypeError: If the file is not a PDF.
    """
    filename = file.filename or ""
    content_type = (file.content_type or "").split(";")[0].strip().lower()

    if content_type in PDF_MEDIA_TYPES:
        return filename
    if content_type in ("", "application/octet-stream") and filename.lower().endswith(".pdf"):
        return filename

    raise InputTypeError(f"Only PDF files are accepted (got {content_type or 'unknown'})")


async def _read_and_validate_size(file: UploadFile, max_size: int) -> bytes:
    """Read file content and validate size.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > max_size:
        size_mb = len(content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)",
        )

    return content


async def _process_upload(pdf: UploadFile | None, settings: AppSettings) -> PipelineResult:
    """Validate an upload and run the pipeline on it.

    Raises:
        HTTPException: 400 for a missing or non-PDF file, 413 for oversized
            files, 500 when the PDF cannot be decoded.
    """
    if pdf is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded",
        )

    try:
        filename = _validate_media_type(pdf)
    except InputTypeError as e:
        logger.warning(f"Rejected upload {pdf.filename!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    content = await _read_and_validate_size(pdf, settings.max_upload_size)

    try:
        result = await run_pipeline_async(content, timeout=settings.decode_timeout)
    except DecodeError as e:
        logger.warning(f"PDF decode error for {filename!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to parse PDF",
        ) from e

    logger.info(
        f"Processed {filename!r}: {result.page_count} page(s), {len(result.prompts)} prompt(s)"
    )
    return result


@router.post("/upload", response_model=TextResponse, responses=ERROR_RESPONSES)
async def upload_pdf(
    pdf: UploadFile | None = File(None),
    settings: AppSettings = Depends(get_settings),
) -> TextResponse:
    """Upload a PDF and return its extracted text.

    Args:
        pdf: The uploaded PDF file (multipart/form-data field "pdf").

    Returns:
        TextResponse with the page texts, each followed by a newline.
    """
    result = await _process_upload(pdf, settings)
    return TextResponse(text=result.document_text)


@router.post("/prompts", response_model=PromptsResponse, responses=ERROR_RESPONSES)
async def generate_prompts(
    pdf: UploadFile | None = File(None),
    settings: AppSettings = Depends(get_settings),
) -> PromptsResponse:
    """Upload a PDF and return its text with generated study prompts.

    An empty prompt list is a successful result; ``message`` then carries
    the text to show instead of the list.
    """
    result = await _process_upload(pdf, settings)
    return PromptsResponse(
        text=result.document_text,
        prompts=result.prompts,
        pages=result.page_count,
        message=EMPTY_STATE_MESSAGE if result.is_empty else None,
    )
