from abc import ABC, abstractmethod

from doctext.pdf.models import PageHandle, PdfHandle, TextContent


class BasePdfDecoder(ABC):
    """Contract for all structural PDF decoder adapters.

    All methods raise PdfDecodeError on failure.
    """

    @abstractmethod
    def load(self, data: bytes) -> PdfHandle:
        """Open a PDF from raw bytes and report its page count."""

    @abstractmethod
    def get_page(self, handle: PdfHandle, number: int) -> PageHandle:
        """Fetch a page by its 1-based number."""

    @abstractmethod
    def get_text_content(self, page: PageHandle) -> TextContent:
        """Return the page's text tokens."""

    @abstractmethod
    def close(self, handle: PdfHandle) -> None:
        """Release resources held by an opened document."""
