import io

import pytesseract
from PIL import Image, UnidentifiedImageError

from docsum.ocr.base import BaseImageExtractor
from docsum.ocr.exceptions import OcrExtractionError


class TesseractAdapter(BaseImageExtractor):
    """Runs Tesseract OCR over an image decoded with Pillow.

    A non-zero timeout kills the Tesseract process once it expires.
    """

    def __init__(
        self,
        *,
        language: str = "eng",
        timeout_seconds: int = 0,
        tesseract_cmd: str | None = None,
    ) -> None:
        self._language = language
        self._timeout_seconds = timeout_seconds
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def extract(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                img.load()
                text = pytesseract.image_to_string(
                    img,
                    lang=self._language,
                    timeout=self._timeout_seconds,
                )
        except UnidentifiedImageError as exc:
            raise OcrExtractionError(f"image could not be decoded: {exc}") from exc
        except pytesseract.TesseractError as exc:
            raise OcrExtractionError(f"tesseract failed: {exc}") from exc
        except RuntimeError as exc:
            # pytesseract signals an expired timeout with a bare RuntimeError
            raise OcrExtractionError(f"tesseract timed out: {exc}") from exc
        except Exception as exc:
            raise OcrExtractionError(f"tesseract failed: {exc}") from exc
        return (text or "").strip()
