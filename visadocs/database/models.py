from dataclasses import dataclass
from datetime import datetime
from typing import Any

DOCUMENT_TYPES = ("I-94", "I-20", "H-1B")
IMPORTANCE_LEVELS = ("critical", "important", "info")

STATUS_PROCESSING = "processing"
STATUS_COMPLETED = "completed"
STATUS_FAILED = "failed"


@dataclass
class DocumentRecord:
    """Represents a row from the documents table."""

    id: int
    user_id: int
    type: str
    file_name: str
    file_id: str
    status: str
    uploaded_at: datetime | None = None
    analysis_result: dict[str, Any] | None = None


@dataclass
class DeadlineRecord:
    """Represents a row from the deadlines table."""

    id: int
    user_id: int
    title: str
    description: str
    due_date: str
    importance: str
    completed: bool = False
    reminder_sent: bool = False
    document_id: int | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class NewDeadline:
    """Values for a deadline row that has not been inserted yet."""

    user_id: int
    title: str
    description: str
    due_date: str
    importance: str
    document_id: int | None = None


@dataclass
class JobRecord:
    """Represents a row from the analysis_jobs table."""

    id: int
    document_id: int
    status: str
    error_message: str | None = None
    locked_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
