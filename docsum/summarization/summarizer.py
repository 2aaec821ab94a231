"""Length-aware summarization over a generative-text provider."""

from pathlib import Path

from docsum.logging.logger import Log
from docsum.summarization.client_base import BaseSummarizationClient
from docsum.summarization.exceptions import SummarizationCallError, SummarizationQuotaError
from docsum.summarization.models import SummaryFailure, SummaryLength, SummaryOutcome
from docsum.summarization.prompt_loader import load_prompt_templates

DEFAULT_SYSTEM_PROMPT = (
    "You are an assistant that writes faithful, neutral summaries of documents. "
    "Do not invent facts that are not present in the document."
)


class Summarizer:
    """Produces one summary per call and degrades to a fallback instead of raising.

    No client failure escapes ``summarize``: it comes back as a
    ``SummaryOutcome`` carrying the fallback text and the failure reason.
    Only a broken prompt template raises.
    """

    def __init__(
        self,
        *,
        client: BaseSummarizationClient,
        model: str,
        temperature: float = 0.3,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._templates = load_prompt_templates(prompt_dir)

    def summarize(self, text: str, length: SummaryLength) -> SummaryOutcome:
        prompt = self._build_prompt(text, length)
        try:
            summary = self._client.create_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
            )
        except SummarizationQuotaError as exc:
            Log.warning(f"{length.value} summary unavailable, quota exceeded: {exc}")
            return SummaryOutcome.fallback(length, SummaryFailure.QUOTA_EXCEEDED)
        except SummarizationCallError as exc:
            Log.warning(f"{length.value} summary unavailable: {exc}")
            return SummaryOutcome.fallback(length, SummaryFailure.UNAVAILABLE)
        except Exception:
            Log.exception(f"{length.value} summary client failed unexpectedly")
            return SummaryOutcome.fallback(length, SummaryFailure.UNAVAILABLE)

        Log.info(f"Generated {length.value} summary ({len(summary)} chars)")
        return SummaryOutcome.generated(length, summary)

    def _build_prompt(self, text: str, length: SummaryLength) -> str:
        return self._templates[length].format(document_text=text)
