from pathlib import Path

from doctext.config.settings import Settings
from doctext.exceptions import NoDocumentError
from doctext.export.adapter import to_clipboard_payload, to_downloadable
from doctext.export.clipboard import BaseClipboard, MemoryClipboard
from doctext.export.download import DownloadWriter
from doctext.intake.models import Document, FileHandle
from doctext.intake.validator import IntakeValidator
from doctext.logging.logger import Log
from doctext.processor.processor import Processor, build_processor
from doctext.session.extracted_text import ExtractedText
from doctext.session.models import SessionState
from doctext.session.session import ExtractionSession


class TextExtractor:
    """User-facing operations over one document, session and working text.

    Presentation code calls these actions and renders ``session`` and ``text``;
    it subscribes to the session for progress instead of owning that state.
    """

    def __init__(
        self,
        validator: IntakeValidator,
        processor: Processor,
        session: ExtractionSession,
        clipboard: BaseClipboard,
        download_writer: DownloadWriter,
        text: ExtractedText | None = None,
    ) -> None:
        self._validator = validator
        self._processor = processor
        self._session = session
        self._clipboard = clipboard
        self._download_writer = download_writer
        self._text = text if text is not None else ExtractedText()
        self._document: Document | None = None

    @property
    def session(self) -> ExtractionSession:
        return self._session

    @property
    def text(self) -> ExtractedText:
        return self._text

    @property
    def document(self) -> Document | None:
        return self._document

    def submit_file(self, handle: FileHandle) -> Document:
        """Validate and store a picked file, replacing any previous one.

        Raises:
            FileTooLargeError: if the file exceeds the size ceiling.
        """
        document = self._validator.validate(handle)
        self._document = document
        self._text.clear()
        Log.info(
            f"Accepted '{document.name}' ({document.size_bytes} bytes, "
            f"{document.declared_type.value})"
        )
        return document

    def submit_drop(self, handle: FileHandle) -> Document:
        """Drag-and-drop entry point; same semantics as ``submit_file``."""
        return self.submit_file(handle)

    async def start_extraction(self) -> ExtractionSession:
        """Extract text from the submitted document.

        Extraction failures leave the session ``failed`` and are not raised.

        Raises:
            NoDocumentError: if no file has been submitted.
            UnsupportedFileTypeError: if no strategy handles the document.
            ExtractionAlreadyInProgressError: if an extraction is running.
        """
        if self._document is None:
            raise NoDocumentError("No file submitted. Please choose a PDF or image first.")
        if not self._session.is_running:
            self._text.clear()
        await self._processor.process(self._document)
        if self._session.state is SessionState.COMPLETED:
            self._text.replace(self._session.result_text or "")
        return self._session

    def copy_to_clipboard(self) -> str:
        payload = to_clipboard_payload(self._text.value)
        self._clipboard.write(payload)
        Log.info(f"Copied {len(payload)} chars to clipboard")
        return payload

    def clear_result(self) -> None:
        """Forget the text, the submitted document and the session outcome."""
        self._session.reset()
        self._text.clear()
        self._document = None

    def apply_uppercase(self) -> str:
        return self._text.apply_uppercase()

    def apply_power_case(self) -> str:
        return self._text.apply_power_case()

    def collapse_whitespace(self) -> str:
        return self._text.collapse_whitespace()

    def download_as_text(self, directory: Path | None = None) -> Path:
        path = self._download_writer.save(to_downloadable(self._text.value), directory)
        Log.info(f"Saved extracted text to {path}")
        return path


def build_extractor(
    settings: Settings,
    clipboard: BaseClipboard | None = None,
    download_dir: Path | None = None,
) -> TextExtractor:
    """Build a TextExtractor with all required adapters."""
    session = ExtractionSession()
    return TextExtractor(
        validator=IntakeValidator(settings.max_file_size_bytes),
        processor=build_processor(settings, session),
        session=session,
        clipboard=clipboard if clipboard is not None else MemoryClipboard(),
        download_writer=DownloadWriter(download_dir),
    )
