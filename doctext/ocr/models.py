from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class OcrProgress:
    """A coarse progress notification emitted by an OCR engine."""

    status: str
    progress: float  # fraction of the current status, 0.0 to 1.0


@dataclass(frozen=True)
class OcrResult:
    """Recognized text for one image."""

    text: str


OcrProgressCallback = Callable[[OcrProgress], None]
