import pymupdf

from doctext.pdf.base import BasePdfDecoder
from doctext.pdf.exceptions import PdfDecodeError
from doctext.pdf.models import PageHandle, PdfHandle, TextContent, TextItem

# Index of the word string in tuples returned by Page.get_text("words").
_WORD_TEXT_INDEX = 4


class PyMuPdfAdapter(BasePdfDecoder):
    """Decodes PDF pages and word tokens using PyMuPDF."""

    def load(self, data: bytes) -> PdfHandle:
        try:
            doc = pymupdf.open(stream=data, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfDecodeError(f"pymupdf could not open document: {exc}") from exc
        if doc.needs_pass:
            doc.close()
            raise PdfDecodeError("pymupdf could not open document: password required")
        return PdfHandle(page_count=doc.page_count, native=doc)

    def get_page(self, handle: PdfHandle, number: int) -> PageHandle:
        if not 1 <= number <= handle.page_count:
            raise PdfDecodeError(
                f"Page {number} out of range (document has {handle.page_count} pages)"
            )
        try:
            return PageHandle(number=number, native=handle.native.load_page(number - 1))
        except Exception as exc:
            raise PdfDecodeError(f"pymupdf could not load page {number}: {exc}") from exc

    def get_text_content(self, page: PageHandle) -> TextContent:
        try:
            words = page.native.get_text("words", sort=True)
            return TextContent(items=[TextItem(text=word[_WORD_TEXT_INDEX]) for word in words])
        except Exception as exc:
            raise PdfDecodeError(
                f"pymupdf text extraction failed on page {page.number}: {exc}"
            ) from exc

    def close(self, handle: PdfHandle) -> None:
        if handle.native is not None:
            handle.native.close()
