from doctext.config.settings import Settings
from doctext.ocr.base import BaseOcrEngine
from doctext.ocr.tesseract_adapter import TesseractAdapter


class OcrEngineFactory:
    """Creates the configured OCR engine adapter."""

    ENGINES: tuple[str, ...] = ("tesseract",)

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        if engine == "tesseract":
            return TesseractAdapter(tesseract_cmd=settings.tesseract_cmd)
        raise ValueError(
            f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
