from doctext.exceptions import ExtractionError


class OcrError(ExtractionError):
    """Raised when the OCR engine fails to recognize an image."""
