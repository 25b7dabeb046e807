from doctext.exceptions import DocTextError, ExtractionError


class IntakeError(DocTextError):
    """Base exception for file intake rejections."""


class FileTooLargeError(IntakeError):
    """Raised when a submitted file exceeds the configured size ceiling."""


class FileReadError(ExtractionError):
    """Raised when an accepted document's bytes cannot be read."""
