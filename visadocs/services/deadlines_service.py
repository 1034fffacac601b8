from datetime import date

from visadocs.database.models import IMPORTANCE_LEVELS, DeadlineRecord, NewDeadline
from visadocs.database.repositories.deadlines_repository import DeadlinesRepository
from visadocs.logging.logger import Log
from visadocs.services.auth import require_user
from visadocs.services.exceptions import DeadlineNotFoundError, InvalidImportanceError


def parse_due_date(due_date: str) -> date | None:
    """Parse an ISO-8601 due date, ignoring any time part. None if unparseable."""
    try:
        return date.fromisoformat(due_date[:10])
    except ValueError:
        return None


def sort_by_due_date(deadlines: list[DeadlineRecord]) -> list[DeadlineRecord]:
    """Stable ascending sort by due date; unparseable dates go last."""
    return sorted(
        deadlines,
        key=lambda d: (parse_due_date(d.due_date) is None, parse_due_date(d.due_date) or date.max),
    )


class DeadlinesService:
    """Read and write access to a user's deadlines."""

    def __init__(self, deadline_repo: DeadlinesRepository) -> None:
        self._deadline_repo = deadline_repo

    def list_deadlines(self, user_id: int | None) -> list[DeadlineRecord]:
        """List the caller's deadlines by ascending due date. Empty when unauthenticated."""
        if user_id is None:
            return []
        return sort_by_due_date(self._deadline_repo.list_by_user(user_id))

    def toggle_deadline_completion(self, user_id: int | None, deadline_id: int) -> bool:
        """Flip the completed flag and return its new value.

        Raises:
            AuthenticationError: if the caller is not authenticated.
            DeadlineNotFoundError: if the deadline is absent or not owned.
        """
        owner_id = require_user(user_id)
        completed = self._deadline_repo.toggle_completed(owner_id, deadline_id)
        if completed is None:
            raise DeadlineNotFoundError("Deadline not found")
        return completed

    def create_deadline(
        self,
        user_id: int | None,
        title: str,
        description: str,
        due_date: str,
        importance: str,
    ) -> int:
        """Create a custom deadline not tied to any document.

        Raises:
            AuthenticationError: if the caller is not authenticated.
            InvalidImportanceError: if importance is not a known level.
        """
        owner_id = require_user(user_id)
        if importance not in IMPORTANCE_LEVELS:
            raise InvalidImportanceError(
                f"Unsupported importance {importance!r}. "
                f"Choose from: {list(IMPORTANCE_LEVELS)}"
            )
        deadline_id = self._deadline_repo.create(
            NewDeadline(
                user_id=owner_id,
                title=title,
                description=description,
                due_date=due_date,
                importance=importance,
            )
        )
        Log.info(f"Created deadline {deadline_id} for user {owner_id}")
        return deadline_id

    def delete_deadline(self, user_id: int | None, deadline_id: int) -> None:
        """Delete one of the caller's deadlines.

        Raises:
            AuthenticationError: if the caller is not authenticated.
            DeadlineNotFoundError: if the deadline is absent or not owned.
        """
        owner_id = require_user(user_id)
        if not self._deadline_repo.delete_owned(owner_id, deadline_id):
            raise DeadlineNotFoundError("Deadline not found")
        Log.info(f"Deleted deadline {deadline_id} for user {owner_id}")
