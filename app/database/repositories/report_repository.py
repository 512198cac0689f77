from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.database.connection import MongoConnection
from app.database.exceptions import PersistenceError, ReportNotFoundError
from app.database.models import ReportRecord, ReportStatus


class ReportRepository:
    """Document store operations for the analysis reports collection."""

    def __init__(self, connection: MongoConnection, collection_name: str) -> None:
        self._connection = connection
        self._collection_name = collection_name

    def collection(self) -> Collection:
        """Resolve the collection, connecting on first use."""
        return self._connection.connect()[self._collection_name]

    def insert(self, record: ReportRecord) -> str:
        """Insert a new record and return its generated id."""
        try:
            result = self.collection().insert_one(record.to_document())
        except PyMongoError as exc:
            raise PersistenceError(f"Failed to insert report record: {exc}") from exc
        record.id = str(result.inserted_id)
        return record.id

    def update(self, report_id: str, patch: dict[str, Any]) -> int:
        """Merge the given fields into a record.

        Returns:
            The number of modified documents. Zero is not treated as an error.

        Raises:
            ReportNotFoundError: if the id is not a valid record id.
            PersistenceError: on any driver failure.
        """
        object_id = _to_object_id(report_id)
        try:
            result = self.collection().update_one({"_id": object_id}, {"$set": patch})
        except PyMongoError as exc:
            raise PersistenceError(
                f"Failed to update report record {report_id}: {exc}"
            ) from exc
        return result.modified_count

    def mark_completed(self, report_id: str, report_text: str) -> int:
        return self.update(
            report_id,
            {
                "status": ReportStatus.COMPLETED.value,
                "report": report_text,
                "error": None,
                "lastUpdated": datetime.now(timezone.utc),
            },
        )

    def mark_error(self, report_id: str, message: str) -> int:
        return self.update(
            report_id,
            {
                "status": ReportStatus.ERROR.value,
                "report": None,
                "error": message,
                "lastUpdated": datetime.now(timezone.utc),
            },
        )

    def find_by_id(self, report_id: str) -> ReportRecord | None:
        """Find a record by id. Returns None when absent."""
        object_id = _to_object_id(report_id)
        try:
            doc = self.collection().find_one({"_id": object_id})
        except PyMongoError as exc:
            raise PersistenceError(
                f"Failed to load report record {report_id}: {exc}"
            ) from exc
        if doc is None:
            return None
        return ReportRecord.from_document(doc)


def _to_object_id(report_id: str) -> ObjectId:
    try:
        return ObjectId(report_id)
    except (InvalidId, TypeError) as exc:
        raise ReportNotFoundError(f"Invalid report id: {report_id!r}") from exc
