from pydantic import BaseModel, Field


class TextResponse(BaseModel):
    """Response carrying the raw extracted document text.

    Attributes:
        text: Page texts, each followed by a newline.
    """

    text: str


class PromptsResponse(BaseModel):
    """Response with the extracted text and generated study prompts.

    Attributes:
        text: Page texts, each followed by a newline.
        prompts: Generated prompts in document order (at most five).
        pages: Number of pages in the document.
        message: Empty-state message when no prompts were generated.
    """

    text: str
    prompts: list[str] = Field(default_factory=list)
    pages: int = Field(ge=0)
    message: str | None = None


class ErrorResponse(BaseModel):
    """Error body returned for failed requests.

    Attributes:
        error: Human-readable error message.
    """

    error: str
