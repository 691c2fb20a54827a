"""Pydantic models for API responses.

Models:
    - TextResponse: Raw document text from an upload
    - PromptsResponse: Document text plus generated prompts
    - ErrorResponse: Error message body
"""

from studyprompts.models.schemas import ErrorResponse, PromptsResponse, TextResponse

__all__ = ["ErrorResponse", "PromptsResponse", "TextResponse"]
