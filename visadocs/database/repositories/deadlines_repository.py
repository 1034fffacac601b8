from typing import Any

import psycopg
from psycopg.rows import dict_row

from visadocs.database.connection import get_connection
from visadocs.database.models import DeadlineRecord, NewDeadline

_DEADLINE_COLUMNS = """
    id, user_id, document_id, title, description, due_date, importance,
    completed, reminder_sent, created_at
"""

_INSERT_SQL = """
    INSERT INTO deadlines
        (user_id, document_id, title, description, due_date, importance,
         completed, reminder_sent)
    VALUES (%s, %s, %s, %s, %s, %s, FALSE, FALSE)
    RETURNING id
"""


class DeadlinesRepository:
    """Database operations for the deadlines table."""

    def insert_many(
        self,
        conn: psycopg.Connection[Any],
        deadlines: list[NewDeadline],
    ) -> list[int]:
        """Insert deadlines in order on the caller's connection. Caller commits."""
        ids: list[int] = []
        with conn.cursor() as cur:
            for deadline in deadlines:
                cur.execute(_INSERT_SQL, _insert_params(deadline))
                row = cur.fetchone()
                if row is None:
                    raise RuntimeError("Deadline insert returned no id")
                ids.append(int(row[0]))
        return ids

    def create(self, deadline: NewDeadline) -> int:
        """Insert a single deadline and commit."""
        with get_connection() as conn:
            [deadline_id] = self.insert_many(conn, [deadline])
            conn.commit()
        return deadline_id

    def list_by_user(self, user_id: int) -> list[DeadlineRecord]:
        """List a user's deadlines in store order (newest first)."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_DEADLINE_COLUMNS}
                    FROM deadlines
                    WHERE user_id = %s
                    ORDER BY created_at DESC, id DESC
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()

        return [_to_record(row) for row in rows]

    def list_by_document(self, document_id: int) -> list[DeadlineRecord]:
        """List deadlines derived from a document, in insertion order."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_DEADLINE_COLUMNS}
                    FROM deadlines
                    WHERE document_id = %s
                    ORDER BY id
                    """,
                    (document_id,),
                )
                rows = cur.fetchall()

        return [_to_record(row) for row in rows]

    def find_owned(self, user_id: int, deadline_id: int) -> DeadlineRecord | None:
        """Find a deadline only if it belongs to the given user."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_DEADLINE_COLUMNS}
                    FROM deadlines
                    WHERE id = %s AND user_id = %s
                    """,
                    (deadline_id, user_id),
                )
                row = cur.fetchone()

        return _to_record(row) if row is not None else None

    def toggle_completed(self, user_id: int, deadline_id: int) -> bool | None:
        """Flip the completed flag of an owned deadline.

        Returns:
            The new completed value, or None if no owned deadline matched.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE deadlines
                    SET completed = NOT completed
                    WHERE id = %s AND user_id = %s
                    RETURNING completed
                    """,
                    (deadline_id, user_id),
                )
                row = cur.fetchone()
            conn.commit()

        return bool(row[0]) if row is not None else None

    def delete_owned(self, user_id: int, deadline_id: int) -> bool:
        """Delete an owned deadline. Returns False if nothing matched."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "DELETE FROM deadlines WHERE id = %s AND user_id = %s",
                    (deadline_id, user_id),
                )
                deleted = cur.rowcount > 0
            conn.commit()
        return deleted


def _insert_params(deadline: NewDeadline) -> tuple[object, ...]:
    return (
        deadline.user_id,
        deadline.document_id,
        deadline.title,
        deadline.description,
        deadline.due_date,
        deadline.importance,
    )


def _to_record(row: dict[str, Any]) -> DeadlineRecord:
    return DeadlineRecord(
        id=row["id"],
        user_id=row["user_id"],
        document_id=row["document_id"],
        title=row["title"],
        description=row["description"],
        due_date=row["due_date"],
        importance=row["importance"],
        completed=row["completed"],
        reminder_sent=row["reminder_sent"],
        created_at=row["created_at"],
    )
