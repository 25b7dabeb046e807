import asyncio

from doctext.extraction.base import BaseExtractionStrategy, ProgressCallback
from doctext.logging.logger import Log
from doctext.ocr.base import BaseOcrEngine
from doctext.ocr.exceptions import OcrError
from doctext.ocr.models import OcrProgress, OcrProgressCallback
from doctext.util.concurrency import maybe_to_thread

DEFAULT_LANGUAGE = "eng"


class ImageExtractionStrategy(BaseExtractionStrategy):
    """Runs OCR over an image and relays the engine's progress."""

    name = "image"

    def __init__(
        self,
        engine: BaseOcrEngine,
        language: str = DEFAULT_LANGUAGE,
        offload: bool = True,
    ) -> None:
        self._engine = engine
        self._language = language
        self._offload = offload

    async def extract(self, data: bytes, on_progress: ProgressCallback) -> str:
        relay = self._make_relay(on_progress, asyncio.get_running_loop())
        try:
            result = await maybe_to_thread(
                self._offload, self._engine.recognize, data, self._language, relay
            )
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(str(exc)) from exc
        Log.info(f"OCR recognized {len(result.text)} chars")
        return result.text

    def _make_relay(
        self,
        on_progress: ProgressCallback,
        loop: asyncio.AbstractEventLoop,
    ) -> OcrProgressCallback:
        # Offloaded engines call back from a worker thread; progress must still
        # be applied on the loop, ahead of the result.
        def relay(event: OcrProgress) -> None:
            Log.debug(f"OCR {event.status}: {event.progress:.0%}")
            percent = int(event.progress * 100)
            if self._offload:
                loop.call_soon_threadsafe(on_progress, percent)
            else:
                on_progress(percent)

        return relay
