from docsum.config.settings import Settings
from docsum.logging.logger import Log
from docsum.pdf.base import BasePdfExtractor
from docsum.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docsum.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Picks the PDF text engine named by PDF_ENGINE."""

    ENGINES: dict[str, type[BasePdfExtractor]] = {
        PdfPlumberAdapter.ENGINE: PdfPlumberAdapter,
        PyMuPdfAdapter.ENGINE: PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        engine_cls = cls.ENGINES.get(engine)
        if engine_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ENGINES)}"
            )
        Log.info(f"PDF text extraction engine: {engine}")
        return engine_cls()
