"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - make_pdf: Builds PDF bytes in memory from lists of text lines
    - single_page_pdf: One page with one line of text
    - empty_pdf: A decodable PDF with zero pages
    - make_encrypted_pdf: Builds a one-page PDF encrypted by pypdf
    - async_client: HTTPX client for API testing

PDFs are generated per test so no binary fixtures live in the repository.
"""

import io
from collections.abc import AsyncGenerator, Callable, Sequence

import pytest
from httpx import ASGITransport, AsyncClient
from pypdf import PdfReader, PdfWriter

from studyprompts.api import create_app
from studyprompts.config import AppSettings


def _escape_pdf_string(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: Sequence[Sequence[str]]) -> bytes:
    """Build a minimal PDF with one Helvetica text line per entry.

    Args:
        pages: For each page, the lines of text to draw on it. An empty
            list gives a page without any text.

    Returns:
        Complete PDF file bytes with a valid cross-reference table.
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    for page_id, lines in zip(page_ids, pages):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                "/Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        ops = ["BT", "/F1 12 Tf", "72 720 Td"]
        for i, line in enumerate(lines):
            if i:
                ops.append("0 -16 Td")
            ops.append(f"({_escape_pdf_string(line)}) Tj")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")
        objects.append(b"<< /Length %d >>\nstream\n%s\nendstream" % (len(stream), stream))

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n%s\nendobj\n" % (number, body)

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


def build_encrypted_pdf(
    lines: Sequence[str], user_password: str, owner_password: str | None = None
) -> bytes:
    """Build a one-page PDF and encrypt it with pypdf (RC4, no crypto backend)."""
    writer = PdfWriter(clone_from=PdfReader(io.BytesIO(build_pdf([lines]))))
    writer.encrypt(user_password=user_password, owner_password=owner_password)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_pdf() -> Callable[[Sequence[Sequence[str]]], bytes]:
    """Return the in-memory PDF builder."""
    return build_pdf


@pytest.fixture
def make_encrypted_pdf() -> Callable[..., bytes]:
    """Return the encrypted PDF builder."""
    return build_encrypted_pdf


@pytest.fixture
def single_page_pdf() -> bytes:
    """PDF with a single page holding one sentence."""
    return build_pdf([["Photosynthesis converts light energy into chemical energy."]])


@pytest.fixture
def empty_pdf() -> bytes:
    """Decodable PDF with zero pages."""
    return build_pdf([])


@pytest.fixture
def test_settings() -> AppSettings:
    """Settings with a small upload limit for size tests."""
    return AppSettings(max_upload_size_mb=1, decode_timeout=10)


@pytest.fixture
async def async_client(test_settings: AppSettings) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app(test_settings))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
