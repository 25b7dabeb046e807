import io

import pdfplumber

from doctext.pdf.base import BasePdfDecoder
from doctext.pdf.exceptions import PdfDecodeError
from doctext.pdf.models import PageHandle, PdfHandle, TextContent, TextItem


class PdfPlumberAdapter(BasePdfDecoder):
    """Decodes PDF pages and word tokens using pdfplumber."""

    def load(self, data: bytes) -> PdfHandle:
        try:
            pdf = pdfplumber.open(io.BytesIO(data))
            return PdfHandle(page_count=len(pdf.pages), native=pdf)
        except Exception as exc:
            raise PdfDecodeError(f"pdfplumber could not open document: {exc}") from exc

    def get_page(self, handle: PdfHandle, number: int) -> PageHandle:
        if not 1 <= number <= handle.page_count:
            raise PdfDecodeError(
                f"Page {number} out of range (document has {handle.page_count} pages)"
            )
        try:
            return PageHandle(number=number, native=handle.native.pages[number - 1])
        except Exception as exc:
            raise PdfDecodeError(f"pdfplumber could not load page {number}: {exc}") from exc

    def get_text_content(self, page: PageHandle) -> TextContent:
        try:
            words = page.native.extract_words()
            return TextContent(items=[TextItem(text=word["text"]) for word in words])
        except Exception as exc:
            raise PdfDecodeError(
                f"pdfplumber text extraction failed on page {page.number}: {exc}"
            ) from exc

    def close(self, handle: PdfHandle) -> None:
        if handle.native is not None:
            handle.native.close()
