from abc import ABC, abstractmethod
from dataclasses import dataclass

from doctext.extraction.base import BaseExtractionStrategy
from doctext.intake.models import Document


@dataclass(slots=True)
class PipelineContext:
    document: Document
    strategy: BaseExtractionStrategy | None = None
    raw_bytes: bytes = b""
    extracted_text: str = ""
    error_message: str = ""
    started: bool = False


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
