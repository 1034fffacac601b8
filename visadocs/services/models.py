from dataclasses import dataclass, field

from visadocs.database.models import DeadlineRecord, DocumentRecord


@dataclass(frozen=True)
class DocumentView:
    """A document together with a resolved file-access URL."""

    document: DocumentRecord
    file_url: str | None = None


@dataclass(frozen=True)
class DashboardOverview:
    """Counts and the short upcoming-deadline list shown on the dashboard."""

    total_documents: int = 0
    upcoming_count: int = 0
    completed_count: int = 0
    upcoming_deadlines: list[DeadlineRecord] = field(default_factory=list)
