from collections.abc import Callable

from doctext.logging.logger import Log
from doctext.session.exceptions import (
    ExtractionAlreadyInProgressError,
    InvalidSessionTransitionError,
)
from doctext.session.models import SessionState

SessionListener = Callable[["ExtractionSession"], None]


class ExtractionSession:
    """Lifecycle of the single in-flight or most recent extraction attempt.

    idle -> running -> completed | failed. Completed and failed sessions can be
    started again or reset; a running session can do neither. Listeners are
    called after every transition and every progress change.
    """

    def __init__(self) -> None:
        self._state = SessionState.IDLE
        self._progress_percent = 0
        self._result_text: str | None = None
        self._failure_reason: str | None = None
        self._document_name = ""
        self._listeners: list[SessionListener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def progress_percent(self) -> int:
        return self._progress_percent

    @property
    def result_text(self) -> str | None:
        return self._result_text

    @property
    def failure_reason(self) -> str | None:
        return self._failure_reason

    @property
    def document_name(self) -> str:
        return self._document_name

    @property
    def is_running(self) -> bool:
        return self._state is SessionState.RUNNING

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self, document_name: str = "") -> None:
        if self.is_running:
            raise ExtractionAlreadyInProgressError(
                f"Extraction of '{self._document_name}' is already in progress"
            )
        self._state = SessionState.RUNNING
        self._progress_percent = 0
        self._result_text = None
        self._failure_reason = None
        self._document_name = document_name
        Log.debug(f"Session started for '{document_name}'")
        self._notify()

    def report_progress(self, percent: int) -> None:
        """Record progress; values are clamped and never move backwards."""
        self._require_running("report progress")
        percent = max(0, min(100, int(percent)))
        if percent <= self._progress_percent:
            return
        self._progress_percent = percent
        self._notify()

    def complete(self, text: str) -> None:
        self._require_running("complete")
        self._state = SessionState.COMPLETED
        self._result_text = text
        self._progress_percent = 100
        Log.debug(f"Session completed for '{self._document_name}'")
        self._notify()

    def fail(self, reason: str) -> None:
        self._require_running("fail")
        self._state = SessionState.FAILED
        self._failure_reason = reason
        Log.debug(f"Session failed for '{self._document_name}': {reason}")
        self._notify()

    def reset(self) -> None:
        if self.is_running:
            raise ExtractionAlreadyInProgressError(
                f"Cannot reset while extraction of '{self._document_name}' is running"
            )
        self._state = SessionState.IDLE
        self._progress_percent = 0
        self._result_text = None
        self._failure_reason = None
        self._document_name = ""
        self._notify()

    def _require_running(self, action: str) -> None:
        if not self.is_running:
            raise InvalidSessionTransitionError(
                f"Cannot {action} a session in state '{self._state.value}'"
            )

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
