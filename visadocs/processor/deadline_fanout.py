from visadocs.analysis.models import KeyDate
from visadocs.database.models import NewDeadline

DOCUMENT_DEADLINE_DESCRIPTION = "Important date from your document"


def build_deadlines_from_key_dates(
    key_dates: list[KeyDate],
    *,
    user_id: int,
    document_id: int,
) -> list[NewDeadline]:
    """Derive one deadline per key date, in the same order. No deduplication."""
    return [
        NewDeadline(
            user_id=user_id,
            document_id=document_id,
            title=key_date.label,
            description=DOCUMENT_DEADLINE_DESCRIPTION,
            due_date=key_date.date,
            importance=key_date.importance,
        )
        for key_date in key_dates
    ]
