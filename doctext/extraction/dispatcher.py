from doctext.extraction.base import BaseExtractionStrategy
from doctext.extraction.exceptions import UnsupportedFileTypeError
from doctext.intake.models import DeclaredType, Document


class StrategyDispatcher:
    """Routes an accepted document to the strategy for its declared type."""

    def __init__(
        self,
        pdf_strategy: BaseExtractionStrategy,
        image_strategy: BaseExtractionStrategy,
    ) -> None:
        self._strategies: dict[DeclaredType, BaseExtractionStrategy] = {
            DeclaredType.PDF: pdf_strategy,
            DeclaredType.IMAGE: image_strategy,
        }

    def dispatch(self, document: Document) -> BaseExtractionStrategy:
        """Select the extraction strategy for a document.

        Raises:
            UnsupportedFileTypeError: if the document is neither a PDF nor an image.
        """
        strategy = self._strategies.get(document.declared_type)
        if strategy is None:
            media_type = document.media_type or "unknown"
            raise UnsupportedFileTypeError(
                f"Unsupported file type '{media_type}' for '{document.name}'. "
                "Please upload a PDF or image."
            )
        return strategy
