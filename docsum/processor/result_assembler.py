from docsum.processor.models import ExtractedText, ProcessingResult
from docsum.summarization.models import SummarySet


class ResultAssembler:
    """Builds the response record from extracted text and summaries."""

    PREVIEW_CHARS = 1000
    ELLIPSIS = "..."

    def assemble(self, extracted: ExtractedText, summaries: SummarySet) -> ProcessingResult:
        document = extracted.source
        return ProcessingResult(
            original_text=self.preview(extracted.text),
            summaries=summaries,
            file_name=document.file_name,
            file_size=document.size_bytes,
        )

    @classmethod
    def preview(cls, text: str) -> str:
        """First PREVIEW_CHARS characters, with an ellipsis only if something was cut."""
        if len(text) <= cls.PREVIEW_CHARS:
            return text
        return text[: cls.PREVIEW_CHARS] + cls.ELLIPSIS
