from abc import ABC, abstractmethod
from collections.abc import Callable

ProgressCallback = Callable[[int], None]


class BaseExtractionStrategy(ABC):
    """Contract for turning document bytes into plain text."""

    name: str = ""

    @abstractmethod
    async def extract(self, data: bytes, on_progress: ProgressCallback) -> str:
        """Extract plain text from document bytes.

        Args:
            data: Raw document content, owned by the strategy for the call.
            on_progress: Receives integer percentages in [0, 100].

        Returns:
            The extracted text.

        Raises:
            ExtractionError: if the underlying engine fails at any step.
        """
