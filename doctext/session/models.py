from enum import Enum


class SessionState(str, Enum):
    """Lifecycle states of an extraction session."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
