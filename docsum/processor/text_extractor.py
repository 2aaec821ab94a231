from collections.abc import Callable

from docsum.logging.logger import Log
from docsum.ocr.base import BaseImageExtractor
from docsum.pdf.base import BasePdfExtractor
from docsum.processor.exceptions import ExtractionError, UnsupportedFormatError
from docsum.processor.file_loader import FileLoader
from docsum.processor.models import ExtractedText, ExtractionStage, MediaType, UploadedDocument


class TextExtractionDispatcher:
    """Routes a document to the PDF parser or to OCR by media type."""

    def __init__(
        self,
        file_loader: FileLoader,
        pdf_extractor: BasePdfExtractor,
        image_extractor: BaseImageExtractor,
    ) -> None:
        self._file_loader = file_loader
        self._routes: dict[MediaType, tuple[ExtractionStage, Callable[[bytes], str]]] = {
            MediaType.PDF: (ExtractionStage.PDF_PARSE, pdf_extractor.extract),
            MediaType.JPEG: (ExtractionStage.OCR, image_extractor.extract),
            MediaType.PNG: (ExtractionStage.OCR, image_extractor.extract),
        }

    def extract(self, document: UploadedDocument) -> ExtractedText:
        """Extract text from a stored document.

        Raises:
            UnsupportedFormatError: if no extractor handles the media type.
            FileReadError: if the stored file cannot be read.
            ExtractionError: if the extractor fails, with the stage and cause attached.
        """
        route = self._routes.get(document.media_type)
        if route is None:
            raise UnsupportedFormatError(
                f"Unsupported file type: {getattr(document.media_type, 'value', document.media_type)}"
            )
        stage, extract = route

        raw_bytes = self._file_loader.load(document)
        Log.info(f"Running {stage.value} on {document.file_name} ({len(raw_bytes)} bytes)")
        try:
            text = extract(raw_bytes)
        except Exception as exc:
            raise ExtractionError(stage, exc) from exc

        Log.info(f"Extracted {len(text)} chars from {document.file_name}")
        return ExtractedText(text=text, source=document)
