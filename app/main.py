"""Cloud Functions entry point: analyze_csv_content callable."""

from functools import lru_cache
from typing import Any

import firebase_admin
from firebase_functions import https_fn

from app.analysis.callable import dispatch
from app.analysis.handler import AnalysisHandler, build_handler
from app.config.settings import Settings
from app.logging.logger import Log

if not firebase_admin._apps:
    firebase_admin.initialize_app()


@lru_cache(maxsize=1)
def get_handler() -> AnalysisHandler:
    """Initialize settings -> logging -> handler once per process."""
    settings = Settings()
    Log.configure(settings.log_level)
    return build_handler(settings)


@https_fn.on_call(secrets=["MONGODB_URI", "GEMINI_API_KEY"])
def analyze_csv_content(req: https_fn.CallableRequest[Any]) -> dict[str, Any]:
    return dispatch(get_handler, req.auth, req.data)
