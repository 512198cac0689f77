class GenerationError(Exception):
    """Raised when report generation fails."""


class GenerationConfigError(GenerationError):
    """Raised when the generation provider is not configured."""


class GenerationNetworkError(GenerationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class GenerationEmptyResponseError(GenerationError):
    """Raised when the AI provider responds without any usable text."""
