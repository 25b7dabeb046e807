class DocTextError(Exception):
    """Base exception for all doctext errors."""


class ExtractionError(DocTextError):
    """Raised when an extraction attempt fails after it has started.

    The message is surfaced to the user verbatim as the session's failure reason.
    """


class NoDocumentError(DocTextError):
    """Raised when extraction is requested before any file was submitted."""
