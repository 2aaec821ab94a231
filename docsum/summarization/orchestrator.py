from concurrent.futures import ALL_COMPLETED, Future, ThreadPoolExecutor, wait

from docsum.logging.logger import Log
from docsum.processor.exceptions import QuotaExceededError, SummarizationError
from docsum.summarization.models import SummaryLength, SummaryOutcome, SummarySet
from docsum.summarization.summarizer import Summarizer


class SummarizationOrchestrator:
    """Fans text out to one summary call per length and joins on all of them.

    The calls run on a short-lived thread pool so total latency tracks the
    slowest call rather than the sum. ``summarize_all`` only returns after
    every call has settled.
    """

    def __init__(self, summarizer: Summarizer, *, escalate_quota_errors: bool = False) -> None:
        self._summarizer = summarizer
        self._escalate_quota_errors = escalate_quota_errors

    def summarize_all(self, text: str) -> SummarySet:
        if not isinstance(text, str) or not text.strip():
            raise SummarizationError("Cannot summarize empty or non-text input")

        with ThreadPoolExecutor(
            max_workers=len(SummaryLength),
            thread_name_prefix="summary",
        ) as executor:
            futures: dict[SummaryLength, Future[SummaryOutcome]] = {
                length: executor.submit(self._summarizer.summarize, text, length)
                for length in SummaryLength
            }
            wait(futures.values(), return_when=ALL_COMPLETED)

        outcomes: dict[SummaryLength, SummaryOutcome] = {}
        for length, future in futures.items():
            exc = future.exception()
            if exc is not None:
                raise SummarizationError(
                    f"{length.value} summary failed unexpectedly: {exc}"
                ) from exc
            outcomes[length] = future.result()

        summaries = SummarySet(outcomes)
        fallbacks = summaries.fallback_lengths
        if fallbacks:
            Log.warning(
                f"Summaries fell back for: {', '.join(length.value for length in fallbacks)}"
            )
        if self._escalate_quota_errors and summaries.quota_exceeded:
            raise QuotaExceededError(
                "AI service quota exceeded. Please try again later."
            )
        return summaries
