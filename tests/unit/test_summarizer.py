from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docsum.summarization.client_base import BaseSummarizationClient
from docsum.summarization.exceptions import (
    SummarizationNetworkError,
    SummarizationQuotaError,
    SummarizationResponseError,
)
from docsum.summarization.models import FALLBACK_SUMMARY, SummaryFailure, SummaryLength
from docsum.summarization.summarizer import Summarizer


def _make_summarizer(client: MagicMock, **kwargs: object) -> Summarizer:
    return Summarizer(client=client, model="gemini-1.5-flash", **kwargs)  # type: ignore[arg-type]


class TestSummarizer:
    @pytest.mark.parametrize(
        ("length", "marker"),
        [
            (SummaryLength.SHORT, "2-3 concise sentences"),
            (SummaryLength.MEDIUM, "1-2 paragraphs"),
            (SummaryLength.LONG, "3-4 paragraphs"),
        ],
    )
    def test_uses_length_specific_template(self, length: SummaryLength, marker: str) -> None:
        client = MagicMock(spec=BaseSummarizationClient)
        client.create_completion.return_value = "generated"

        outcome = _make_summarizer(client).summarize("Document body", length)

        assert outcome.text == "generated"
        assert outcome.length is length
        assert outcome.is_fallback is False
        prompt = client.create_completion.call_args.kwargs["user_prompt"]
        assert marker in prompt
        assert prompt.rstrip().endswith("Document body")

    def test_calls_provider_exactly_once(self) -> None:
        client = MagicMock(spec=BaseSummarizationClient)
        client.create_completion.return_value = "generated"
        _make_summarizer(client, temperature=0.5).summarize("text", SummaryLength.SHORT)
        client.create_completion.assert_called_once()
        kwargs = client.create_completion.call_args.kwargs
        assert kwargs["model"] == "gemini-1.5-flash"
        assert kwargs["temperature"] == 0.5

    def test_temperature_is_clamped(self) -> None:
        client = MagicMock(spec=BaseSummarizationClient)
        client.create_completion.return_value = "generated"
        _make_summarizer(client, temperature=3.0).summarize("text", SummaryLength.SHORT)
        assert client.create_completion.call_args.kwargs["temperature"] == 1.0

    def test_text_with_braces_is_not_treated_as_template(self) -> None:
        client = MagicMock(spec=BaseSummarizationClient)
        client.create_completion.return_value = "generated"
        _make_summarizer(client).summarize("config {key: value} {0}", SummaryLength.MEDIUM)
        prompt = client.create_completion.call_args.kwargs["user_prompt"]
        assert "config {key: value} {0}" in prompt

    @pytest.mark.parametrize(
        "error",
        [
            SummarizationNetworkError("down"),
            SummarizationResponseError("empty"),
        ],
    )
    def test_call_failure_becomes_unavailable_fallback(self, error: Exception) -> None:
        client = MagicMock(spec=BaseSummarizationClient)
        client.create_completion.side_effect = error

        outcome = _make_summarizer(client).summarize("text", SummaryLength.LONG)

        assert outcome.text == FALLBACK_SUMMARY
        assert outcome.failure is SummaryFailure.UNAVAILABLE

    def test_quota_failure_is_distinguished(self) -> None:
        client = MagicMock(spec=BaseSummarizationClient)
        client.create_completion.side_effect = SummarizationQuotaError("429")

        outcome = _make_summarizer(client).summarize("text", SummaryLength.SHORT)

        assert outcome.text == FALLBACK_SUMMARY
        assert outcome.failure is SummaryFailure.QUOTA_EXCEEDED

    def test_unexpected_client_error_becomes_unavailable_fallback(self) -> None:
        client = MagicMock(spec=BaseSummarizationClient)
        client.create_completion.side_effect = KeyError("choices")

        outcome = _make_summarizer(client).summarize("text", SummaryLength.SHORT)

        assert outcome.text == FALLBACK_SUMMARY
        assert outcome.failure is SummaryFailure.UNAVAILABLE

    def test_custom_prompt_dir(self, tmp_path: Path) -> None:
        for length in SummaryLength:
            (tmp_path / f"{length.value}.txt").write_text(
                f"[{length.value}]\n\n{{document_text}}", encoding="utf-8"
            )
        client = MagicMock(spec=BaseSummarizationClient)
        client.create_completion.return_value = "generated"
        _make_summarizer(client, prompt_dir=tmp_path).summarize("body", SummaryLength.LONG)
        assert client.create_completion.call_args.kwargs["user_prompt"] == "[long]\n\nbody"
