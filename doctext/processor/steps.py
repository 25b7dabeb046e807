from doctext.extraction.dispatcher import StrategyDispatcher
from doctext.intake.file_loader import FileLoader
from doctext.logging.logger import Log
from doctext.processor.pipeline import PipelineContext, PipelineStep
from doctext.session.session import ExtractionSession


class DispatchStrategyStep(PipelineStep):
    def __init__(self, dispatcher: StrategyDispatcher) -> None:
        self._dispatcher = dispatcher

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.strategy = self._dispatcher.dispatch(context.document)
        Log.info(
            f"Document '{context.document.name}' routed to {context.strategy.name} strategy"
        )
        return context


class MarkRunningStep(PipelineStep):
    def __init__(self, session: ExtractionSession) -> None:
        self._session = session

    async def run(self, context: PipelineContext) -> PipelineContext:
        self._session.start(context.document.name)
        context.started = True
        Log.info(f"Extraction of '{context.document.name}' started")
        return context


class LoadDocumentStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._file_loader.load(context.document)
        Log.info(f"Loaded {len(context.raw_bytes)} bytes for '{context.document.name}'")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, session: ExtractionSession) -> None:
        self._session = session

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.strategy is None:
            raise ValueError("PipelineContext.strategy must be set before extraction")
        context.extracted_text = await context.strategy.extract(
            context.raw_bytes,
            on_progress=self._session.report_progress,
        )
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from '{context.document.name}'"
        )
        return context


class MarkCompletedStep(PipelineStep):
    def __init__(self, session: ExtractionSession) -> None:
        self._session = session

    async def run(self, context: PipelineContext) -> PipelineContext:
        self._session.complete(context.extracted_text)
        Log.info(f"Extraction of '{context.document.name}' completed")
        return context


class MarkFailedStep(PipelineStep):
    def __init__(self, session: ExtractionSession) -> None:
        self._session = session

    async def run(self, context: PipelineContext) -> PipelineContext:
        self._session.fail(context.error_message)
        Log.error(
            f"Extraction of '{context.document.name}' failed: {context.error_message}"
        )
        return context
