"""Adapts AnalysisHandler to the Firebase callable function protocol."""

from collections.abc import Callable
from typing import Any

from firebase_functions import https_fn

from app.analysis.exceptions import AnalysisError, ServiceUnavailableError
from app.analysis.handler import AnalysisHandler
from app.logging.logger import Log


def to_https_error(exc: AnalysisError) -> https_fn.HttpsError:
    """Map an analysis error onto the callable error category it carries."""
    return https_fn.HttpsError(
        code=https_fn.FunctionsErrorCode(exc.code),
        message=str(exc),
    )


def dispatch(
    handler_provider: Callable[[], AnalysisHandler],
    auth: https_fn.AuthData | None,
    data: Any,
) -> dict[str, Any]:
    """Run one callable invocation, surfacing failures as HttpsError."""
    try:
        handler = handler_provider()
    except ServiceUnavailableError as exc:
        Log.error(f"Analysis cannot run: service initialization failed: {exc}")
        raise to_https_error(exc) from exc
    except Exception as exc:
        Log.error(f"Analysis cannot run: service initialization failed: {exc}")
        raise to_https_error(
            ServiceUnavailableError("Service initialization failed. Contact support.")
        ) from exc

    user_id = auth.uid if auth is not None else None
    try:
        return handler.handle(user_id, data)
    except AnalysisError as exc:
        raise to_https_error(exc) from exc
