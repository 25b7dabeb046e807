from abc import ABC, abstractmethod

from doctext.ocr.models import OcrProgressCallback, OcrResult


class BaseOcrEngine(ABC):
    """Contract for all OCR engine adapters."""

    @abstractmethod
    def recognize(
        self,
        image: bytes,
        language: str,
        on_progress: OcrProgressCallback | None = None,
    ) -> OcrResult:
        """Recognize the text in an encoded raster image.

        Args:
            image: Encoded image content (PNG, JPEG, GIF, ...).
            language: Recognition language model identifier, e.g. "eng".
            on_progress: Optional receiver for progress notifications. Engines
                         emit them at their own granularity; they are not
                         guaranteed to be monotonic.

        Returns:
            OcrResult with the recognized text, untouched.

        Raises:
            OcrError: on any engine failure.
        """
