import httpx
import openai

from app.generation.client_base import BaseGenerationClient
from app.generation.exceptions import GenerationEmptyResponseError, GenerationNetworkError


class OpenAIClientAdapter(BaseGenerationClient):
    """Generation client adapter built on the OpenAI chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate_text(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise GenerationNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise GenerationEmptyResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise GenerationEmptyResponseError("AI returned empty response")
        return content
