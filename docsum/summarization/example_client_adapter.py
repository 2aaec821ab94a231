"""Offline summarization client.

Handy for local development and tests: no network calls, no API key.
"""

from docsum.summarization.client_base import BaseSummarizationClient


class ExampleClientAdapter(BaseSummarizationClient):
    """Returns a canned summary that echoes the start of the prompt's document."""

    PREVIEW_CHARS = 200

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt
        document = user_prompt.split("\n\n", 1)[-1].strip()
        preview = " ".join(document.split())[: self.PREVIEW_CHARS]
        return f"Example summary: {preview}"
