from doctext.config.settings import Settings
from doctext.exceptions import ExtractionError
from doctext.extraction.dispatcher import StrategyDispatcher
from doctext.extraction.image_strategy import ImageExtractionStrategy
from doctext.extraction.pdf_strategy import PdfExtractionStrategy
from doctext.intake.file_loader import FileLoader
from doctext.intake.models import Document
from doctext.ocr.factory import OcrEngineFactory
from doctext.pdf.factory import PdfDecoderFactory
from doctext.processor.pipeline import PipelineContext, PipelineStep
from doctext.processor.steps import (
    DispatchStrategyStep,
    ExtractTextStep,
    LoadDocumentStep,
    MarkCompletedStep,
    MarkFailedStep,
    MarkRunningStep,
)
from doctext.session.session import ExtractionSession


class Processor:
    """Orchestrates one extraction attempt.

    Pipeline: dispatch -> mark running -> load -> extract -> mark completed.
    Dispatch and single-flight rejections propagate before the session moves.
    Once the session is running, any failure runs the failed step; only
    ExtractionError is absorbed, anything else is re-raised afterwards.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    async def process(self, document: Document) -> PipelineContext:
        context = PipelineContext(document=document)
        try:
            for step in self._steps:
                context = await step.run(context)
        except Exception as exc:
            if not context.started:
                raise
            context.error_message = str(exc)
            context = await self._failed_step.run(context)
            if not isinstance(exc, ExtractionError):
                raise
        finally:
            context.raw_bytes = b""
        return context


def build_processor(settings: Settings, session: ExtractionSession) -> Processor:
    """Build a Processor with all required adapters."""
    offload = settings.offload_blocking_calls
    dispatcher = StrategyDispatcher(
        pdf_strategy=PdfExtractionStrategy(
            PdfDecoderFactory.create(settings),
            offload=offload,
        ),
        image_strategy=ImageExtractionStrategy(
            OcrEngineFactory.create(settings),
            language=settings.ocr_language,
            offload=offload,
        ),
    )
    steps: list[PipelineStep] = [
        DispatchStrategyStep(dispatcher),
        MarkRunningStep(session),
        LoadDocumentStep(FileLoader()),
        ExtractTextStep(session),
        MarkCompletedStep(session),
    ]
    return Processor(steps=steps, failed_step=MarkFailedStep(session))
