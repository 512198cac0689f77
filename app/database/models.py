from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class ReportStatus(str, Enum):
    """Lifecycle states of a report record. COMPLETED and ERROR are terminal."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass
class ReportRecord:
    """Represents a document from the analysis reports collection."""

    user_id: str
    file_name: str
    status: ReportStatus
    created_at: datetime
    last_updated: datetime | None = None
    report: str | None = None
    error: str | None = None
    id: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Build the stored document. The id is assigned by the store."""
        return {
            "userId": self.user_id,
            "fileName": self.file_name,
            "status": self.status.value,
            "createdAt": self.created_at,
            "lastUpdated": self.last_updated,
            "report": self.report,
            "error": self.error,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "ReportRecord":
        return cls(
            id=str(doc["_id"]),
            user_id=doc["userId"],
            file_name=doc["fileName"],
            status=ReportStatus(doc["status"]),
            created_at=doc["createdAt"],
            last_updated=doc.get("lastUpdated"),
            report=doc.get("report"),
            error=doc.get("error"),
        )
