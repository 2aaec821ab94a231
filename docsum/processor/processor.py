from collections.abc import Sequence

from docsum.config.settings import Settings
from docsum.logging.logger import Log
from docsum.ocr.factory import ImageExtractorFactory
from docsum.pdf.factory import PdfExtractorFactory
from docsum.processor.exceptions import ProcessorError
from docsum.processor.file_loader import FileLoader
from docsum.processor.intake import IntakeValidator
from docsum.processor.models import ProcessingResult
from docsum.processor.pipeline import PipelineContext, PipelineStep
from docsum.processor.result_assembler import ResultAssembler
from docsum.processor.steps import (
    AssembleResultStep,
    ExtractTextStep,
    RequireTextStep,
    SummarizeStep,
)
from docsum.processor.storage import TransientFileStore
from docsum.processor.text_extractor import TextExtractionDispatcher
from docsum.summarization.factory import SummarizerFactory


class Processor:
    """Runs one upload through the pipeline.

    Pipeline: validate -> store -> extract -> require text -> summarize -> assemble.
    The stored copy is removed on every exit path before the result or the
    error leaves ``process``.
    """

    def __init__(
        self,
        *,
        validator: IntakeValidator,
        store: TransientFileStore,
        steps: Sequence[PipelineStep],
    ) -> None:
        self._validator = validator
        self._store = store
        self._steps = list(steps)

    def process(self, file_name: str, media_type: str, content: bytes) -> ProcessingResult:
        Log.info(f"Processing {file_name} ({media_type}, {len(content)} bytes)")
        try:
            parsed_type = self._validator.validate(media_type, len(content), file_name)
            with self._store.transient_document(
                content,
                file_name=file_name,
                media_type=parsed_type,
            ) as document:
                context = PipelineContext(document=document)
                for step in self._steps:
                    context = step.run(context)
        except ProcessorError as exc:
            Log.error(f"Processing {file_name} failed: {exc}")
            raise

        if context.result is None:
            raise RuntimeError("Pipeline finished without assembling a result")
        Log.info(f"Processed {file_name} successfully")
        return context.result


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters, once per process."""
    dispatcher = TextExtractionDispatcher(
        file_loader=FileLoader(),
        pdf_extractor=PdfExtractorFactory.create(settings),
        image_extractor=ImageExtractorFactory.create(settings),
    )
    steps: list[PipelineStep] = [
        ExtractTextStep(dispatcher),
        RequireTextStep(),
        SummarizeStep(SummarizerFactory.create_orchestrator(settings)),
        AssembleResultStep(ResultAssembler()),
    ]
    return Processor(
        validator=IntakeValidator(max_size_bytes=settings.max_upload_bytes),
        store=TransientFileStore(settings.upload_dir),
        steps=steps,
    )
