from pathlib import Path

from app.generation.exceptions import GenerationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the analyst persona prompt from a file.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled analyst_system_prompt.txt.

    Returns:
        The prompt text.

    Raises:
        GenerationError: if the file cannot be read or is empty.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analyst_system_prompt.txt"
    try:
        prompt = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Failed to load system prompt: {exc}") from exc
    if not prompt.strip():
        raise GenerationError(f"System prompt file is empty: {path}")
    return prompt
