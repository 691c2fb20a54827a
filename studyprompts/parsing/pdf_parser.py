"""Page text extraction using pypdf.

Decodes a PDF byte buffer and returns the text of every page in document
order. Fragments are the lines pypdf reports for a page, joined with single
spaces. No layout reconstruction is attempted: multi-column or rotated pages
come out in whatever order the decoder yields.
"""

import io
import logging
from collections.abc import Sequence

from pypdf import PasswordType, PdfReader
from pypdf.errors import DependencyError, PdfReadError

from studyprompts.config import ExtractorConfig
from studyprompts.errors import DecodeError

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"
# How far into the buffer the header may start (leading whitespace)
HEADER_SEARCH_WINDOW = 10


class RawDocument:
    """A decoded PDF with 1-based page access.

    Only lives for the duration of one extraction.
    """

    def __init__(self, reader: PdfReader, extraction_mode: str = "plain") -> None:
        self._reader = reader
        self._extraction_mode = extraction_mode

    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    def page_text(self, index: int) -> str:
        """Return the joined text fragments of page ``index`` (1-based).

        Raises:
            IndexError: If the index is outside 1..page_count.
        """
        if not 1 <= index <= self.page_count:
            raise IndexError(f"Page {index} out of range (1..{self.page_count})")

        page = self._reader.pages[index - 1]
        raw = page.extract_text(extraction_mode=self._extraction_mode) or ""
        fragments = [line.strip() for line in raw.splitlines()]
        return " ".join(fragment for fragment in fragments if fragment)


def _validate_pdf_bytes(data: bytes) -> None:
    """Check the buffer looks like a PDF before handing it to pypdf.

    Raises:
        DecodeError: If the buffer is empty or lacks the PDF header.
    """
    if not data:
        raise DecodeError("Empty file provided")

    if not data[:HEADER_SEARCH_WINDOW].lstrip().startswith(PDF_MAGIC_BYTES):
        raise DecodeError("Invalid PDF: file does not start with PDF header")


class PageTextExtractor:
    """Turns PDF bytes into an ordered list of page texts.

    Each instance carries its own decoder settings; nothing is shared
    between extractors, so concurrent uploads can use separate instances.
    """

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self._config = config or ExtractorConfig()

    @property
    def config(self) -> ExtractorConfig:
        return self._config

    def open(self, data: bytes) -> RawDocument:
        """Decode ``data`` into a RawDocument.

        Raises:
            DecodeError: If the buffer is not a readable PDF.
        """
        _validate_pdf_bytes(data)

        try:
            reader = PdfReader(io.BytesIO(data), strict=self._config.strict)
        except PdfReadError as e:
            raise DecodeError(f"Corrupt or invalid PDF: {e}") from e
        except Exception as e:
            raise DecodeError(f"Failed to read PDF: {e}") from e

        if reader.is_encrypted:
            self._decrypt(reader)

        return RawDocument(reader, extraction_mode=self._config.extraction_mode)

    def _decrypt(self, reader: PdfReader) -> None:
        try:
            result = reader.decrypt(self._config.password)
        except DependencyError as e:
            raise DecodeError(f"Unsupported PDF encryption: {e}") from e
        except Exception as e:
            raise DecodeError(f"Failed to decrypt PDF: {e}") from e

        if result == PasswordType.NOT_DECRYPTED:
            raise DecodeError("Encrypted PDF could not be opened with the given password")

    def extract(self, data: bytes) -> list[str]:
        """Extract one text string per page, page 1 first.

        Pages without extractable text give an empty string.

        Raises:
            DecodeError: If decoding fails at any point. No partial result is
                returned.
        """
        document = self.open(data)

        try:
            page_count = document.page_count
            page_texts = [document.page_text(i) for i in range(1, page_count + 1)]
        except PdfReadError as e:
            raise DecodeError(f"Corrupt or invalid PDF: {e}") from e
        except Exception as e:
            raise DecodeError(f"Failed to extract text: {e}") from e

        logger.debug(f"Extracted text from {page_count} page(s)")
        if page_count and not any(page_texts):
            logger.warning("PDF contains no extractable text (may be scanned/image-based)")

        return page_texts


def extract_page_texts(data: bytes, config: ExtractorConfig | None = None) -> list[str]:
    """Extract page texts with a fresh extractor.

    Args:
        data: Raw bytes of the PDF file.
        config: Decoder settings; defaults are used when omitted.

    Returns:
        One string per page in document order.

    Raises:
        DecodeError: If the buffer is not a readable PDF.
    """
    return PageTextExtractor(config).extract(data)


def join_pages(page_texts: Sequence[str]) -> str:
    """Build the document text: each page followed by a single newline."""
    return "".join(f"{page}\n" for page in page_texts)
