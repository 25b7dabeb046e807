import io

import pytesseract
from PIL import Image

from doctext.ocr.base import BaseOcrEngine
from doctext.ocr.exceptions import OcrError
from doctext.ocr.models import OcrProgress, OcrProgressCallback, OcrResult


def _ignore_progress(_event: OcrProgress) -> None:
    return None


class TesseractAdapter(BaseOcrEngine):
    """Recognizes image text with the Tesseract binary via pytesseract."""

    def __init__(self, tesseract_cmd: str = "") -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(
        self,
        image: bytes,
        language: str,
        on_progress: OcrProgressCallback | None = None,
    ) -> OcrResult:
        report = on_progress or _ignore_progress
        try:
            report(OcrProgress(status="loading image", progress=0.0))
            with Image.open(io.BytesIO(image)) as img:
                img.load()
                report(OcrProgress(status="recognizing text", progress=0.0))
                text = pytesseract.image_to_string(img, lang=language)
            report(OcrProgress(status="recognizing text", progress=1.0))
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        return OcrResult(text=text)
