from typing import ClassVar


class AnalysisError(Exception):
    """Base exception for errors surfaced to the caller of an analysis."""

    code: ClassVar[str] = "internal"


class UnauthenticatedError(AnalysisError):
    """Raised when the request carries no caller identity."""

    code = "unauthenticated"


class InvalidArgumentError(AnalysisError):
    """Raised when the request payload is missing or malformed."""

    code = "invalid-argument"


class ServiceUnavailableError(AnalysisError):
    """Raised when the persistence or generation service could not be initialized."""


class AnalysisFailedError(AnalysisError):
    """Raised when generation or persistence fails for an accepted request."""
