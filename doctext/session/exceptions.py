from doctext.exceptions import DocTextError


class SessionError(DocTextError):
    """Base exception for extraction session lifecycle errors."""


class ExtractionAlreadyInProgressError(SessionError):
    """Raised when a session is started or reset while an extraction is running."""


class InvalidSessionTransitionError(SessionError):
    """Raised when a transition is requested from a state that does not allow it."""
