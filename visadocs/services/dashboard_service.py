import math
from datetime import datetime, time

from visadocs.database.repositories.documents_repository import DocumentsRepository
from visadocs.services.deadlines_service import DeadlinesService, parse_due_date
from visadocs.services.models import DashboardOverview

UPCOMING_LIMIT = 5
SOON_THRESHOLD_DAYS = 7


def days_until(due_date: str, now: datetime) -> int | None:
    """Whole days from now until midnight of the due date, rounded up.

    Negative when the deadline has passed. None for unparseable dates.
    """
    parsed = parse_due_date(due_date)
    if parsed is None:
        return None
    delta = datetime.combine(parsed, time.min) - now
    return math.ceil(delta.total_seconds() / 86400)


def deadline_urgency(due_date: str, now: datetime) -> str | None:
    """Classify a due date as overdue, soon (under a week) or later."""
    days = days_until(due_date, now)
    if days is None:
        return None
    if days < 0:
        return "overdue"
    if days < SOON_THRESHOLD_DAYS:
        return "soon"
    return "later"


class DashboardService:
    """Aggregates documents and deadlines for the dashboard overview."""

    def __init__(
        self,
        doc_repo: DocumentsRepository,
        deadlines_service: DeadlinesService,
    ) -> None:
        self._doc_repo = doc_repo
        self._deadlines_service = deadlines_service

    def get_overview(self, user_id: int | None) -> DashboardOverview:
        if user_id is None:
            return DashboardOverview()
        deadlines = self._deadlines_service.list_deadlines(user_id)
        pending = [d for d in deadlines if not d.completed]
        return DashboardOverview(
            total_documents=len(self._doc_repo.list_by_user(user_id)),
            upcoming_count=len(pending),
            completed_count=len(deadlines) - len(pending),
            upcoming_deadlines=pending[:UPCOMING_LIMIT],
        )
