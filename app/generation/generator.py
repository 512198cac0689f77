"""AI-powered CSV business report generator."""

from app.generation.client_base import BaseGenerationClient
from app.generation.exceptions import GenerationEmptyResponseError
from app.logging.logger import Log


class ReportGenerator:
    """Turns raw CSV content into a Markdown business report using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        model: str,
        system_prompt: str,
    ) -> None:
        self._client = client
        self._model = model
        self._system_prompt = system_prompt

    @property
    def model(self) -> str:
        return self._model

    def generate(self, file_content: str) -> str:
        """Generate the report for the given CSV text. Single attempt."""
        prompt = self._build_prompt(file_content)
        Log.info(f"Calling {self._model} with {len(file_content)} chars of CSV data")

        report = self._client.generate_text(
            model=self._model,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        if not report.strip():
            raise GenerationEmptyResponseError(
                "AI analysis returned an invalid or empty response structure."
            )

        Log.info(f"AI analysis successful. Report length: {len(report)}")
        return report

    @staticmethod
    def _build_prompt(file_content: str) -> str:
        return f"\n\nRAW CSV DATA START:\n{file_content}\nRAW CSV DATA END"
