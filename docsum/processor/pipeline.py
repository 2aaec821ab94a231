from abc import ABC, abstractmethod
from dataclasses import dataclass

from docsum.processor.models import ExtractedText, ProcessingResult, UploadedDocument
from docsum.summarization.models import SummarySet


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    extracted: ExtractedText | None = None
    summaries: SummarySet | None = None
    result: ProcessingResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
