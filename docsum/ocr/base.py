from abc import ABC, abstractmethod


class BaseImageExtractor(ABC):
    """Contract for OCR adapters that turn raster images into text."""

    @abstractmethod
    def extract(self, image_bytes: bytes) -> str:
        """Recognize text in an encoded JPEG or PNG image.

        This call is CPU-bound and its duration grows with image resolution.

        Args:
            image_bytes: Raw image file content.

        Returns:
            Recognized text, stripped. Images without glyphs give an empty string.

        Raises:
            OcrExtractionError: on decode failure, engine failure or timeout.
        """
