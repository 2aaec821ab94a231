from docsum.logging.logger import Log
from docsum.processor.exceptions import EmptyTextError
from docsum.processor.pipeline import PipelineContext, PipelineStep
from docsum.processor.result_assembler import ResultAssembler
from docsum.processor.text_extractor import TextExtractionDispatcher
from docsum.summarization.orchestrator import SummarizationOrchestrator


class ExtractTextStep(PipelineStep):
    def __init__(self, dispatcher: TextExtractionDispatcher) -> None:
        self._dispatcher = dispatcher

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted = self._dispatcher.extract(context.document)
        return context


class RequireTextStep(PipelineStep):
    """Stops the pipeline when extraction produced only whitespace."""

    MESSAGE = "No text could be extracted from the document"

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None or not context.extracted.text.strip():
            raise EmptyTextError(self.MESSAGE)
        return context


class SummarizeStep(PipelineStep):
    def __init__(self, orchestrator: SummarizationOrchestrator) -> None:
        self._orchestrator = orchestrator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None:
            raise ValueError("PipelineContext.extracted must be set before summarization")
        context.summaries = self._orchestrator.summarize_all(context.extracted.text)
        Log.info(f"Summarized {context.document.file_name}")
        return context


class AssembleResultStep(PipelineStep):
    def __init__(self, assembler: ResultAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None or context.summaries is None:
            raise ValueError(
                "PipelineContext.extracted and summaries must be set before assembly"
            )
        context.result = self._assembler.assemble(context.extracted, context.summaries)
        return context
