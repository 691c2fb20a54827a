"""Exceptions raised by the document-to-prompt pipeline and its shells."""


class StudyPromptsError(Exception):
    """Base class for all studyprompts errors."""

    pass


class DecodeError(StudyPromptsError):
    """Raised when a byte buffer cannot be decoded as a PDF document.

    Covers wrong magic bytes, corrupt or truncated structure, unsupported
    encryption, and decodes that exceed the configured timeout.
    """

    pass


class InputTypeError(StudyPromptsError):
    """Raised by the upload layer when a file is not a PDF.

    Never raised inside the pipeline itself.
    """

    pass
