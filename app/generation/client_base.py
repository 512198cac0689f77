from abc import ABC, abstractmethod


class BaseGenerationClient(ABC):
    """Contract for provider-specific text generation clients."""

    @abstractmethod
    def generate_text(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the generated text for a single prompt.

        Raises:
            GenerationNetworkError: if the provider call fails.
            GenerationEmptyResponseError: if the response carries no text.
        """
