from typing import Any

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from pydantic import BaseModel, ValidationError

from app.generation.client_base import BaseGenerationClient
from app.generation.exceptions import GenerationEmptyResponseError, GenerationNetworkError
from app.logging.logger import Log


class GeminiPart(BaseModel):
    text: str | None = None


class GeminiContent(BaseModel):
    parts: list[GeminiPart] = []


class GeminiCandidate(BaseModel):
    content: GeminiContent | None = None


class GeminiPromptFeedback(BaseModel):
    block_reason: str | int | None = None


class GeminiResponse(BaseModel):
    """Subset of a generate_content response needed to extract the report."""

    candidates: list[GeminiCandidate] = []
    prompt_feedback: GeminiPromptFeedback | None = None

    def first_text(self) -> str | None:
        """Return the text of the first candidate, or None if it has none."""
        if not self.candidates or self.candidates[0].content is None:
            return None
        texts = [part.text for part in self.candidates[0].content.parts if part.text]
        return "".join(texts) or None

    def block_reason(self) -> str | None:
        """Return why the prompt was blocked, or None if it was not."""
        if self.prompt_feedback is None:
            return None
        reason = self.prompt_feedback.block_reason
        if reason in (None, 0, "BLOCK_REASON_UNSPECIFIED"):
            return None
        return str(reason)


def decode_response(raw: dict[str, Any]) -> str | None:
    """Decode a raw Gemini response dict into its report text, if any."""
    try:
        return GeminiResponse.model_validate(raw).first_text()
    except ValidationError as exc:
        Log.error(f"Unrecognised response structure from Gemini API: {exc}")
        return None


def decode_block_reason(raw: dict[str, Any]) -> str | None:
    """Decode the prompt block reason from a raw Gemini response dict, if any."""
    try:
        return GeminiResponse.model_validate(raw).block_reason()
    except ValidationError:
        return None


class GeminiClientAdapter(BaseGenerationClient):
    """Generation client adapter built on the Google Gemini API."""

    def __init__(self, *, api_key: str) -> None:
        genai.configure(api_key=api_key)

    def generate_text(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        gemini_model = genai.GenerativeModel(model, system_instruction=system_prompt)
        try:
            response = gemini_model.generate_content(user_prompt)
        except google_exceptions.GoogleAPIError as exc:
            raise GenerationNetworkError(f"AI provider API error: {exc}") from exc

        raw = response.to_dict()
        reason = decode_block_reason(raw)
        if reason is not None:
            raise GenerationEmptyResponseError(
                f"AI provider refused to generate a report: prompt blocked ({reason})"
            )
        text = decode_response(raw)
        if text is None:
            Log.error(f"Invalid response structure from Gemini API: {raw}")
            raise GenerationEmptyResponseError(
                "AI analysis returned an invalid or empty response structure."
            )
        return text
