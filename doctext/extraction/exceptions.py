from doctext.exceptions import DocTextError


class UnsupportedFileTypeError(DocTextError):
    """Raised when no extraction strategy handles a document's media type."""
