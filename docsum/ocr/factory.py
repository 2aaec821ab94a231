from docsum.config.settings import Settings
from docsum.ocr.base import BaseImageExtractor
from docsum.ocr.tesseract_adapter import TesseractAdapter


class ImageExtractorFactory:
    """Creates the OCR adapter for image uploads."""

    @classmethod
    def create(cls, settings: Settings) -> BaseImageExtractor:
        return TesseractAdapter(
            language=settings.ocr_language,
            timeout_seconds=max(0, settings.ocr_timeout_seconds),
            tesseract_cmd=settings.tesseract_cmd or None,
        )
