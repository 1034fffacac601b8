from visadocs.analysis.models import KeyDate
from visadocs.database.models import NewDeadline
from visadocs.processor.deadline_fanout import (
    DOCUMENT_DEADLINE_DESCRIPTION,
    build_deadlines_from_key_dates,
)


class TestBuildDeadlines:
    def test_one_deadline_per_key_date_in_order(self) -> None:
        key_dates = [
            KeyDate(label="Admit until", date="2026-03-01", importance="critical"),
            KeyDate(label="Entry", date="2024-09-01", importance="info"),
            KeyDate(label="Entry", date="2024-09-01", importance="info"),
        ]

        deadlines = build_deadlines_from_key_dates(key_dates, user_id=3, document_id=9)

        assert [d.title for d in deadlines] == ["Admit until", "Entry", "Entry"]
        assert [d.due_date for d in deadlines] == ["2026-03-01", "2024-09-01", "2024-09-01"]
        assert [d.importance for d in deadlines] == ["critical", "info", "info"]

    def test_copies_owner_and_document(self) -> None:
        key_dates = [KeyDate(label="Entry", date="2025-01-01", importance="critical")]

        [deadline] = build_deadlines_from_key_dates(key_dates, user_id=3, document_id=9)

        assert deadline == NewDeadline(
            user_id=3,
            document_id=9,
            title="Entry",
            description=DOCUMENT_DEADLINE_DESCRIPTION,
            due_date="2025-01-01",
            importance="critical",
        )

    def test_no_key_dates_yields_nothing(self) -> None:
        assert build_deadlines_from_key_dates([], user_id=3, document_id=9) == []
