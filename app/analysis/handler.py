from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from app.analysis.exceptions import (
    AnalysisFailedError,
    InvalidArgumentError,
    ServiceUnavailableError,
    UnauthenticatedError,
)
from app.config.settings import Settings
from app.database.connection import MongoConnection
from app.database.exceptions import PersistenceError
from app.database.models import ReportRecord, ReportStatus
from app.database.repositories.report_repository import ReportRepository
from app.generation.exceptions import GenerationError
from app.generation.factory import GeneratorFactory
from app.generation.generator import ReportGenerator
from app.logging.logger import Log


class AnalysisHandler:
    """Validates an upload, generates its report and tracks the record lifecycle.

    Lifecycle: processing -> completed | error. Both terminal states are
    written at most once per request.
    """

    def __init__(
        self,
        report_repo: ReportRepository,
        generator: ReportGenerator,
    ) -> None:
        self._report_repo = report_repo
        self._generator = generator

    def handle(self, user_id: str | None, data: Any) -> dict[str, Any]:
        """Run one analysis request for an authenticated caller.

        Raises:
            UnauthenticatedError: if user_id is missing.
            InvalidArgumentError: if fileContent or fileName is invalid.
            ServiceUnavailableError: if the document store cannot be reached.
            AnalysisFailedError: if generation or a record write fails.
        """
        if not user_id:
            Log.error("Function called without authentication.")
            raise UnauthenticatedError("The function must be called while authenticated.")
        Log.info(f"Received analysis request from authenticated user: {user_id}")

        file_content, file_name = self._validate(data)
        Log.info(f"Received file: {file_name}, Content length: {len(file_content)}")

        try:
            self._report_repo.collection()
        except PersistenceError as exc:
            Log.error(f"Analysis cannot run: database connection failed: {exc}")
            raise ServiceUnavailableError(
                "Database connection failed. Contact support."
            ) from exc

        created_at = datetime.now(timezone.utc)
        record = ReportRecord(
            user_id=user_id,
            file_name=file_name,
            status=ReportStatus.PROCESSING,
            created_at=created_at,
            last_updated=created_at,
        )
        report_id: str | None = None

        try:
            report_id = self._report_repo.insert(record)
            Log.info(f"Initial analysis record created with ID: {report_id}")

            report_text = self._generator.generate(file_content)

            modified = self._report_repo.mark_completed(report_id, report_text)
            if modified != 1:
                Log.warning(
                    f"Report update might not have fully completed for {report_id}. "
                    f"Modified count: {modified}"
                )
        except Exception as exc:
            message = str(exc) or "Unknown error during analysis."
            self._record_failure(user_id, file_name, report_id, message)
            raise AnalysisFailedError(f"AI Analysis Failed: {message}") from exc

        Log.info(f"Analysis complete for {report_id}. Returning report.")
        return {
            "status": ReportStatus.COMPLETED.value,
            "reportId": report_id,
            "report": report_text,
            "fileName": file_name,
            "createdAt": created_at.isoformat(),
        }

    @staticmethod
    def _validate(data: Any) -> tuple[str, str]:
        if not isinstance(data, Mapping):
            raise InvalidArgumentError("The function must be called with an object payload.")
        file_content = data.get("fileContent")
        if not isinstance(file_content, str) or not file_content.strip():
            Log.error("Invalid argument: fileContent missing or empty.")
            raise InvalidArgumentError(
                'The function must be called with a non-empty "fileContent" string.'
            )
        file_name = data.get("fileName")
        if not isinstance(file_name, str) or not file_name:
            Log.error("Invalid argument: fileName missing or not a string.")
            raise InvalidArgumentError(
                'The function must be called with a "fileName" string.'
            )
        return file_content, file_name

    def _record_failure(
        self,
        user_id: str,
        file_name: str,
        report_id: str | None,
        message: str,
    ) -> None:
        """Best-effort terminal error write. Never raises."""
        Log.error(
            f"Error during AI analysis or DB operations for user {user_id}, "
            f"file {file_name}, (report ID: {report_id}): {message}"
        )
        if report_id is None:
            Log.error(
                "Could not record error status because the initial insert failed."
            )
            return
        try:
            self._report_repo.mark_error(report_id, message)
            Log.info(f"Report record {report_id} updated with error status.")
        except Exception as write_exc:
            Log.error(
                f"Failed to update report record {report_id} with error status "
                f"after primary failure: {write_exc}"
            )


def build_handler(settings: Settings) -> AnalysisHandler:
    """Build an AnalysisHandler with all required adapters.

    Raises:
        ServiceUnavailableError: if either external service is not configured.
    """
    if not settings.mongodb_uri:
        raise ServiceUnavailableError("MongoDB URI not configured. Set MONGODB_URI.")
    try:
        generator = GeneratorFactory.create(settings)
    except (GenerationError, ValueError) as exc:
        Log.error(f"Failed to initialize report generator: {exc}")
        raise ServiceUnavailableError(
            "AI Service Initialization Failed. Contact support."
        ) from exc
    Log.info(f"Report generator initialized with model {generator.model}")

    connection = MongoConnection(settings)
    report_repo = ReportRepository(connection, settings.mongodb_collection)
    return AnalysisHandler(report_repo=report_repo, generator=generator)
