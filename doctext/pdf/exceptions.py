from doctext.exceptions import ExtractionError


class PdfDecodeError(ExtractionError):
    """Raised when the PDF decoder fails to load a document, a page or its text."""
