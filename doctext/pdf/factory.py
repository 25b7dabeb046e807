from doctext.config.settings import Settings
from doctext.pdf.base import BasePdfDecoder
from doctext.pdf.pdfplumber_adapter import PdfPlumberAdapter
from doctext.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfDecoderFactory:
    """Creates the correct PDF decoder based on settings."""

    ADAPTERS: dict[str, type[BasePdfDecoder]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfDecoder:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
