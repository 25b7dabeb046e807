import io
from pathlib import Path

import pytest
from PIL import Image, ImageDraw
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _pdf_with_pages(*page_texts: str) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in page_texts:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf_with_pages("Hello PDF World")


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf_with_pages("Page one content", "Page two content")


@pytest.fixture()
def three_page_pdf_bytes() -> bytes:
    return _pdf_with_pages("Hello", "World", "!")


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf_with_pages("")


@pytest.fixture()
def sample_png_bytes() -> bytes:
    """A white PNG with black text drawn on it."""
    img = Image.new("RGB", (240, 80), "white")
    ImageDraw.Draw(img).text((10, 30), "HELLO", fill="black")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def write_file(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Write bytes under tmp_path and return the path."""

    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
