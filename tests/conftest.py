import json

import pytest

from visadocs.database.models import DeadlineRecord, DocumentRecord


@pytest.fixture()
def processing_document() -> DocumentRecord:
    """An I-94 document that is waiting for analysis."""
    return DocumentRecord(
        id=7,
        user_id=42,
        type="I-94",
        file_name="i94.pdf",
        file_id="file-abc",
        status="processing",
    )


@pytest.fixture()
def chatty_model_reply() -> str:
    """Model reply with a valid JSON envelope wrapped in prose."""
    envelope = {
        "summary": "ok",
        "keyDates": [{"label": "Entry", "date": "2025-01-01", "importance": "critical"}],
        "nextSteps": [],
        "warnings": [],
        "details": {},
    }
    return f"Sure! {json.dumps(envelope)} Thanks"


@pytest.fixture()
def make_deadline():
    """Factory for deadline records with sensible defaults."""

    def _make(
        deadline_id: int = 1,
        due_date: str = "2025-06-01",
        completed: bool = False,
        user_id: int = 42,
    ) -> DeadlineRecord:
        return DeadlineRecord(
            id=deadline_id,
            user_id=user_id,
            title=f"Deadline {deadline_id}",
            description="Important date from your document",
            due_date=due_date,
            importance="important",
            completed=completed,
        )

    return _make
