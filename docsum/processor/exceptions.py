from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docsum.processor.models import ExtractionStage


class ProcessorError(Exception):
    """Base exception for all request-level pipeline errors."""


class ValidationError(ProcessorError):
    """Raised when an upload's declared type or size is rejected by intake policy."""


class UnsupportedFormatError(ProcessorError):
    """Raised when no extractor is registered for a document's media type."""


class FileReadError(ProcessorError):
    """Raised when the transient copy of an upload cannot be read back."""


class StorageError(ProcessorError):
    """Raised when an upload cannot be written to transient storage."""


class ExtractionError(ProcessorError):
    """Raised when PDF parsing or OCR fails; carries the stage and the cause."""

    def __init__(self, stage: "ExtractionStage", cause: BaseException) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage.value} failed: {cause}")


class EmptyTextError(ProcessorError):
    """Raised when extraction worked but produced no usable text."""


class SummarizationError(ProcessorError):
    """Raised when summarization fails as a whole rather than per call."""


class QuotaExceededError(SummarizationError):
    """Raised when the AI provider's quota is exhausted and escalation is enabled."""
