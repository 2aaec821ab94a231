from typing import ClassVar

from docsum.config.settings import Settings
from docsum.summarization.client_base import BaseSummarizationClient
from docsum.summarization.example_client_adapter import ExampleClientAdapter
from docsum.summarization.openai_client_adapter import OpenAIClientAdapter
from docsum.summarization.orchestrator import SummarizationOrchestrator
from docsum.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the configured summarizer and its orchestrator."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> Summarizer:
        """Create a summarizer from application settings."""
        provider = settings.summarization_provider.strip().lower()
        if provider == "example":
            return Summarizer(client=ExampleClientAdapter(), model="example", temperature=0.0)
        return Summarizer(
            client=cls._create_client(provider, settings),
            model=settings.summarization_model_name,
            temperature=settings.summarization_temperature,
        )

    @classmethod
    def create_orchestrator(cls, settings: Settings) -> SummarizationOrchestrator:
        return SummarizationOrchestrator(
            cls.create(settings),
            escalate_quota_errors=settings.escalate_quota_errors,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseSummarizationClient:
        if not settings.summarization_model_name.strip():
            raise ValueError(
                f"summarization_model_name is required for summarization_provider={provider}"
            )
        return OpenAIClientAdapter(
            api_key=settings.summarization_api_key,
            timeout_seconds=settings.summarization_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.summarization_base_url.strip()
            if not url:
                raise ValueError(
                    "summarization_base_url is required for "
                    "summarization_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.summarization_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown summarization provider '{provider}'. Choose from: {supported}"
        )
