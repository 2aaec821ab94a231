import httpx
import openai

from docsum.summarization.client_base import BaseSummarizationClient
from docsum.summarization.exceptions import (
    SummarizationNetworkError,
    SummarizationQuotaError,
    SummarizationResponseError,
)


class OpenAIClientAdapter(BaseSummarizationClient):
    """Summarization client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        # No SDK-level retries: each summary gets a single attempt.
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,
            )
        except openai.RateLimitError as exc:
            raise SummarizationQuotaError(f"AI provider quota exceeded: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SummarizationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise SummarizationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise SummarizationResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None or not content.strip():
            raise SummarizationResponseError("AI returned empty response")
        return content.strip()
