from doctext.extraction.base import BaseExtractionStrategy
from doctext.extraction.dispatcher import StrategyDispatcher
from doctext.extraction.image_strategy import ImageExtractionStrategy
from doctext.extraction.pdf_strategy import PdfExtractionStrategy

__all__ = [
    "BaseExtractionStrategy",
    "ImageExtractionStrategy",
    "PdfExtractionStrategy",
    "StrategyDispatcher",
]
