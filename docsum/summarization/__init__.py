from docsum.summarization.factory import SummarizerFactory
from docsum.summarization.models import (
    FALLBACK_SUMMARY,
    SummaryFailure,
    SummaryLength,
    SummaryOutcome,
    SummarySet,
)
from docsum.summarization.orchestrator import SummarizationOrchestrator
from docsum.summarization.summarizer import Summarizer

__all__ = [
    "FALLBACK_SUMMARY",
    "SummarizationOrchestrator",
    "Summarizer",
    "SummarizerFactory",
    "SummaryFailure",
    "SummaryLength",
    "SummaryOutcome",
    "SummarySet",
]
