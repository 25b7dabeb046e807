from unittest.mock import patch

import pytest
import pytesseract

from doctext.ocr.exceptions import OcrError
from doctext.ocr.models import OcrProgress
from doctext.ocr.tesseract_adapter import TesseractAdapter

IMAGE_TO_STRING = "doctext.ocr.tesseract_adapter.pytesseract.image_to_string"


class TestRecognize:
    def test_returns_engine_text_verbatim(self, sample_png_bytes: bytes) -> None:
        with patch(IMAGE_TO_STRING, return_value="  HELLO\n\f") as mock_ocr:
            result = TesseractAdapter().recognize(sample_png_bytes, "eng")

        assert result.text == "  HELLO\n\f"
        mock_ocr.assert_called_once()
        assert mock_ocr.call_args.kwargs["lang"] == "eng"

    def test_passes_language(self, sample_png_bytes: bytes) -> None:
        with patch(IMAGE_TO_STRING, return_value="") as mock_ocr:
            TesseractAdapter().recognize(sample_png_bytes, "deu")

        assert mock_ocr.call_args.kwargs["lang"] == "deu"

    def test_emits_progress_ending_at_one(self, sample_png_bytes: bytes) -> None:
        events: list[OcrProgress] = []
        with patch(IMAGE_TO_STRING, return_value="HELLO"):
            TesseractAdapter().recognize(sample_png_bytes, "eng", on_progress=events.append)

        assert events[0] == OcrProgress(status="loading image", progress=0.0)
        assert events[-1] == OcrProgress(status="recognizing text", progress=1.0)


class TestRecognizeFailures:
    def test_wraps_engine_failure(self, sample_png_bytes: bytes) -> None:
        with patch(IMAGE_TO_STRING, side_effect=RuntimeError("timeout")):
            with pytest.raises(OcrError, match="timeout"):
                TesseractAdapter().recognize(sample_png_bytes, "eng")

    def test_wraps_undecodable_image(self) -> None:
        with pytest.raises(OcrError, match="tesseract recognition failed"):
            TesseractAdapter().recognize(b"not an image", "eng")

    def test_no_final_progress_on_failure(self, sample_png_bytes: bytes) -> None:
        events: list[OcrProgress] = []
        with patch(IMAGE_TO_STRING, side_effect=RuntimeError("boom")):
            with pytest.raises(OcrError):
                TesseractAdapter().recognize(sample_png_bytes, "eng", on_progress=events.append)

        assert all(event.progress < 1.0 for event in events)


class TestTesseractCmd:
    def test_configures_binary_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(pytesseract.pytesseract, "tesseract_cmd", "tesseract")

        TesseractAdapter(tesseract_cmd="/opt/tesseract/bin/tesseract")

        assert pytesseract.pytesseract.tesseract_cmd == "/opt/tesseract/bin/tesseract"

    def test_keeps_default_binary_when_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(pytesseract.pytesseract, "tesseract_cmd", "tesseract")

        TesseractAdapter()

        assert pytesseract.pytesseract.tesseract_cmd == "tesseract"
