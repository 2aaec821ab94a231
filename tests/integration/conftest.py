from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docsum.ocr.base import BaseImageExtractor
from docsum.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docsum.processor.file_loader import FileLoader
from docsum.processor.intake import IntakeValidator
from docsum.processor.processor import Processor
from docsum.processor.result_assembler import ResultAssembler
from docsum.processor.steps import (
    AssembleResultStep,
    ExtractTextStep,
    RequireTextStep,
    SummarizeStep,
)
from docsum.processor.storage import TransientFileStore
from docsum.processor.text_extractor import TextExtractionDispatcher
from docsum.summarization.client_base import BaseSummarizationClient
from docsum.summarization.orchestrator import SummarizationOrchestrator
from docsum.summarization.summarizer import Summarizer


@pytest.fixture()
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture()
def image_extractor() -> MagicMock:
    """OCR stand-in so the suite does not need a tesseract binary."""
    extractor = MagicMock(spec=BaseImageExtractor)
    extractor.extract.return_value = "Text recognized from the scanned receipt"
    return extractor


@pytest.fixture()
def make_processor(upload_dir: Path, image_extractor: MagicMock):  # type: ignore[no-untyped-def]
    def _make(client: BaseSummarizationClient, *, escalate: bool = False) -> Processor:
        dispatcher = TextExtractionDispatcher(
            file_loader=FileLoader(),
            pdf_extractor=PdfPlumberAdapter(),
            image_extractor=image_extractor,
        )
        orchestrator = SummarizationOrchestrator(
            Summarizer(client=client, model="test-model"),
            escalate_quota_errors=escalate,
        )
        return Processor(
            validator=IntakeValidator(),
            store=TransientFileStore(upload_dir),
            steps=[
                ExtractTextStep(dispatcher),
                RequireTextStep(),
                SummarizeStep(orchestrator),
                AssembleResultStep(ResultAssembler()),
            ],
        )

    return _make
