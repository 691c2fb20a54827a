"""PDF decoding and page text extraction.

Responsibilities:
    - PDF validation and decoding with pypdf
    - Ordered per-page text extraction
    - Joining page texts into the document text shown to users

No layout reconstruction and no caching: every call decodes a fresh document.
"""

from studyprompts.parsing.pdf_parser import (
    PageTextExtractor,
    RawDocument,
    extract_page_texts,
    join_pages,
)

__all__ = ["PageTextExtractor", "RawDocument", "extract_page_texts", "join_pages"]
