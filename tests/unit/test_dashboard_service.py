from datetime import datetime
from unittest.mock import MagicMock

import pytest

from visadocs.services.dashboard_service import (
    DashboardService,
    days_until,
    deadline_urgency,
)
from visadocs.services.deadlines_service import DeadlinesService
from visadocs.services.models import DashboardOverview

NOW = datetime(2025, 1, 1, 12, 0)


class TestDaysUntil:
    @pytest.mark.parametrize(
        ("due_date", "expected"),
        [
            ("2025-01-03", 2),
            ("2025-01-02", 1),
            ("2025-01-01", 0),
            ("2024-12-30", -2),
        ],
    )
    def test_rounds_up_to_whole_days(self, due_date: str, expected: int) -> None:
        assert days_until(due_date, NOW) == expected

    def test_unparseable_date_returns_none(self) -> None:
        assert days_until("next week", NOW) is None


class TestDeadlineUrgency:
    def test_past_date_is_overdue(self) -> None:
        assert deadline_urgency("2024-12-30", NOW) == "overdue"

    def test_within_a_week_is_soon(self) -> None:
        assert deadline_urgency("2025-01-05", NOW) == "soon"

    def test_a_week_or_more_is_later(self) -> None:
        assert deadline_urgency("2025-01-08", NOW) == "later"

    def test_unparseable_date_has_no_urgency(self) -> None:
        assert deadline_urgency("tbd", NOW) is None


class TestGetOverview:
    def _make_service(self, deadlines: list, documents: list) -> DashboardService:
        deadline_repo = MagicMock()
        deadline_repo.list_by_user.return_value = deadlines
        doc_repo = MagicMock()
        doc_repo.list_by_user.return_value = documents
        return DashboardService(doc_repo, DeadlinesService(deadline_repo))

    def test_counts_and_first_five_upcoming(self, make_deadline) -> None:
        deadlines = [make_deadline(i, f"2025-01-{10 - i:02d}") for i in range(1, 8)]
        deadlines.append(make_deadline(20, "2025-01-01", completed=True))
        service = self._make_service(deadlines, documents=[MagicMock(), MagicMock()])

        overview = service.get_overview(42)

        assert overview.total_documents == 2
        assert overview.upcoming_count == 7
        assert overview.completed_count == 1
        assert [d.id for d in overview.upcoming_deadlines] == [7, 6, 5, 4, 3]

    def test_unauthenticated_caller_gets_empty_overview(self) -> None:
        service = self._make_service([], [])

        assert service.get_overview(None) == DashboardOverview()
