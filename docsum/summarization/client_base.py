from abc import ABC, abstractmethod


class BaseSummarizationClient(ABC):
    """Contract for provider-specific generative-text clients."""

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the provider's generated text.

        Raises:
            SummarizationCallError: on any provider or transport failure.
        """
