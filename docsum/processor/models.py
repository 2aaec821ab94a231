from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from docsum.summarization.models import SummarySet


class MediaType(str, Enum):
    """Closed set of accepted upload formats, valued by MIME type."""

    PDF = "application/pdf"
    JPEG = "image/jpeg"
    PNG = "image/png"

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]

    @classmethod
    def from_mime(cls, mime_type: str) -> "MediaType | None":
        """Parse a declared Content-Type, ignoring case and parameters."""
        base = mime_type.split(";", 1)[0].strip().lower()
        try:
            return cls(base)
        except ValueError:
            return None


_SUFFIXES = {
    MediaType.PDF: ".pdf",
    MediaType.JPEG: ".jpg",
    MediaType.PNG: ".png",
}


class ExtractionStage(str, Enum):
    PDF_PARSE = "pdf-parse"
    OCR = "ocr"


@dataclass(frozen=True)
class UploadedDocument:
    """An upload held in transient storage for the duration of one request."""

    file_name: str
    media_type: MediaType
    size_bytes: int
    storage_path: Path


@dataclass(frozen=True)
class ExtractedText:
    text: str
    source: UploadedDocument


@dataclass(frozen=True)
class ProcessingResult:
    """Immutable outcome of a successful request."""

    original_text: str
    summaries: SummarySet
    file_name: str
    file_size: int
    success: bool = True

    def to_payload(self) -> dict[str, object]:
        """Render the JSON body returned to the client."""
        return {
            "success": self.success,
            "originalText": self.original_text,
            "summaries": self.summaries.as_dict(),
            "fileName": self.file_name,
            "fileSize": self.file_size,
        }
