import sys
from abc import ABC, abstractmethod
from typing import TextIO


class BaseClipboard(ABC):
    """Contract for clipboard sinks."""

    @abstractmethod
    def write(self, payload: str) -> None:
        """Place the payload on the clipboard."""


class MemoryClipboard(BaseClipboard):
    """Keeps the last copied payload in memory."""

    def __init__(self) -> None:
        self.contents = ""

    def write(self, payload: str) -> None:
        self.contents = payload


class StreamClipboard(BaseClipboard):
    """Writes the payload to a text stream, e.g. stdout piped into xclip or pbcopy."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write(self, payload: str) -> None:
        self._stream.write(payload)
        self._stream.flush()
