from collections.abc import Callable
from typing import Any, TypeVar

from doctext.extraction.base import BaseExtractionStrategy, ProgressCallback
from doctext.logging.logger import Log
from doctext.pdf.base import BasePdfDecoder
from doctext.pdf.exceptions import PdfDecodeError
from doctext.util.concurrency import maybe_to_thread

T = TypeVar("T")

PAGE_SEPARATOR = " "
TOKEN_SEPARATOR = " "


def page_progress(pages_done: int, page_count: int) -> int:
    """Percentage reported after ``pages_done`` of ``page_count`` pages."""
    return 100 * pages_done // page_count


class PdfExtractionStrategy(BaseExtractionStrategy):
    """Decodes a PDF page by page and concatenates the page text."""

    name = "pdf"

    def __init__(self, decoder: BasePdfDecoder, offload: bool = True) -> None:
        self._decoder = decoder
        self._offload = offload

    async def extract(self, data: bytes, on_progress: ProgressCallback) -> str:
        handle = await self._decode(self._decoder.load, data)
        try:
            page_count = handle.page_count
            Log.info(f"PDF loaded: {page_count} pages")
            if page_count == 0:
                on_progress(100)
                return ""

            page_texts: list[str] = []
            for index in range(page_count):
                page = await self._decode(self._decoder.get_page, handle, index + 1)
                content = await self._decode(self._decoder.get_text_content, page)
                page_texts.append(TOKEN_SEPARATOR.join(item.text for item in content.items))
                on_progress(page_progress(index + 1, page_count))
                Log.debug(f"Decoded page {index + 1}/{page_count}")
            return PAGE_SEPARATOR.join(page_texts)
        finally:
            self._decoder.close(handle)

    async def _decode(self, func: Callable[..., T], *args: Any) -> T:
        try:
            return await maybe_to_thread(self._offload, func, *args)
        except PdfDecodeError:
            raise
        except Exception as exc:
            raise PdfDecodeError(str(exc)) from exc
