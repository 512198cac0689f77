from app.config.settings import Settings
from app.generation.client_base import BaseGenerationClient
from app.generation.example_client_adapter import ExampleClientAdapter
from app.generation.exceptions import GenerationConfigError
from app.generation.gemini_client_adapter import GeminiClientAdapter
from app.generation.generator import ReportGenerator
from app.generation.openai_client_adapter import OpenAIClientAdapter
from app.generation.prompt_loader import load_system_prompt


class GeneratorFactory:
    """Creates the configured report generator."""

    PROVIDERS = ("gemini", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> ReportGenerator:
        """Create a configured generator from application settings.

        Raises:
            GenerationConfigError: if the provider's API key is missing.
            GenerationError: if the system prompt cannot be loaded.
            ValueError: for an unknown provider.
        """
        provider = settings.generation_provider.lower()
        client, model = cls._create_client(provider, settings)
        return ReportGenerator(
            client=client,
            model=model,
            system_prompt=load_system_prompt(settings.system_prompt_path),
        )

    @classmethod
    def _create_client(
        cls, provider: str, settings: Settings
    ) -> tuple[BaseGenerationClient, str]:
        if provider == "example":
            return ExampleClientAdapter(), "example"
        if provider == "gemini":
            cls._require_key(settings.gemini_api_key, "GEMINI_API_KEY")
            return (
                GeminiClientAdapter(api_key=settings.gemini_api_key),
                settings.gemini_model_name,
            )
        if provider == "openai":
            cls._require_key(settings.openai_api_key, "OPENAI_API_KEY")
            client = OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
            )
            return client, settings.openai_model_name
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

    @staticmethod
    def _require_key(key: str, env_name: str) -> None:
        if not key.strip():
            raise GenerationConfigError(f"API key not configured. Set {env_name}.")
