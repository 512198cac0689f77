from unittest.mock import MagicMock, patch

import pytest
from google.api_core import exceptions as google_exceptions

from app.generation.exceptions import GenerationEmptyResponseError, GenerationNetworkError
from app.generation.gemini_client_adapter import (
    GeminiClientAdapter,
    decode_block_reason,
    decode_response,
)


def _raw_response(*texts: str | None) -> dict[str, object]:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": t} for t in texts]},
                "finish_reason": 1,
            }
        ],
        "usage_metadata": {"total_token_count": 42},
    }


class TestDecodeBlockReason:
    def test_blocked_prompt_yields_reason(self) -> None:
        raw = {"prompt_feedback": {"block_reason": "SAFETY", "safety_ratings": []}}
        assert decode_block_reason(raw) == "SAFETY"

    def test_integer_reason_is_stringified(self) -> None:
        assert decode_block_reason({"prompt_feedback": {"block_reason": 2}}) == "2"

    def test_unspecified_reason_yields_none(self) -> None:
        raw = {"prompt_feedback": {"block_reason": "BLOCK_REASON_UNSPECIFIED"}}
        assert decode_block_reason(raw) is None

    def test_answered_prompt_yields_none(self) -> None:
        assert decode_block_reason(_raw_response("## Report")) is None


class TestDecodeResponse:
    def test_extracts_first_candidate_text(self) -> None:
        assert decode_response(_raw_response("## Report")) == "## Report"

    def test_joins_text_parts(self) -> None:
        assert decode_response(_raw_response("## Exec", "utive")) == "## Executive"

    def test_no_candidates_yields_none(self) -> None:
        assert decode_response({"candidates": []}) is None

    def test_missing_candidates_key_yields_none(self) -> None:
        assert decode_response({"prompt_feedback": {"block_reason": 1}}) is None

    def test_candidate_without_content_yields_none(self) -> None:
        assert decode_response({"candidates": [{"finish_reason": 3}]}) is None

    def test_parts_without_text_yield_none(self) -> None:
        assert decode_response(_raw_response(None)) is None

    def test_malformed_structure_yields_none(self) -> None:
        assert decode_response({"candidates": "nope"}) is None


def _generate(model_cls: MagicMock) -> str:
    with (
        patch("app.generation.gemini_client_adapter.genai.configure"),
        patch(
            "app.generation.gemini_client_adapter.genai.GenerativeModel",
            model_cls,
        ),
    ):
        adapter = GeminiClientAdapter(api_key="k")
        return adapter.generate_text(
            model="gemini-1.5-flash",
            system_prompt="persona",
            user_prompt="csv",
        )


class TestGeminiClientAdapter:
    def test_configures_api_key(self) -> None:
        with patch("app.generation.gemini_client_adapter.genai.configure") as configure:
            GeminiClientAdapter(api_key="secret")
        configure.assert_called_once_with(api_key="secret")

    def test_returns_report_text(self) -> None:
        model_cls = MagicMock()
        model_cls.return_value.generate_content.return_value.to_dict.return_value = (
            _raw_response("## Report")
        )
        assert _generate(model_cls) == "## Report"

    def test_passes_system_instruction_and_prompt(self) -> None:
        model_cls = MagicMock()
        model_cls.return_value.generate_content.return_value.to_dict.return_value = (
            _raw_response("## Report")
        )
        _generate(model_cls)
        model_cls.assert_called_once_with("gemini-1.5-flash", system_instruction="persona")
        model_cls.return_value.generate_content.assert_called_once_with("csv")

    def test_empty_structure_raises_empty_response(self) -> None:
        model_cls = MagicMock()
        model_cls.return_value.generate_content.return_value.to_dict.return_value = {
            "candidates": []
        }
        with pytest.raises(GenerationEmptyResponseError, match="invalid or empty"):
            _generate(model_cls)

    def test_api_error_raises_network_error(self) -> None:
        model_cls = MagicMock()
        model_cls.return_value.generate_content.side_effect = (
            google_exceptions.ResourceExhausted("quota exceeded")
        )
        with pytest.raises(GenerationNetworkError, match="quota exceeded"):
            _generate(model_cls)

    def test_blocked_prompt_raises_empty_response(self) -> None:
        model_cls = MagicMock()
        model_cls.return_value.generate_content.return_value.to_dict.return_value = {
            "candidates": [],
            "prompt_feedback": {"block_reason": "SAFETY", "safety_ratings": []},
        }
        with pytest.raises(GenerationEmptyResponseError, match=r"refused.*SAFETY"):
            _generate(model_cls)
