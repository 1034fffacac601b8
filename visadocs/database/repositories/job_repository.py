from typing import Any

import psycopg
from psycopg.rows import dict_row

from visadocs.database.connection import get_connection
from visadocs.database.models import JobRecord

_JOB_COLUMNS = """
    id, document_id, status, error_message, locked_at, created_at, updated_at
"""


class JobRepository:
    """Database operations for the analysis_jobs table."""

    def enqueue(self, conn: psycopg.Connection[Any], document_id: int) -> int:
        """Insert a pending job for a document. Caller commits.

        Runs on the caller's connection so the job lands in the same
        transaction as the document row.
        """
        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO analysis_jobs (document_id, status)
                VALUES (%s, 'pending')
                RETURNING id
                """,
                (document_id,),
            )
            row = cur.fetchone()
        if row is None:
            raise RuntimeError(f"Failed to enqueue analysis for document {document_id}")
        return int(row[0])

    def claim_next_job(self, conn: psycopg.Connection[Any]) -> JobRecord | None:
        """Claim the next pending job using SELECT FOR UPDATE SKIP LOCKED."""
        with conn.cursor(row_factory=dict_row) as cur:
            cur.execute(
                """
                SELECT id, document_id, status
                FROM analysis_jobs
                WHERE status = 'pending'
                ORDER BY created_at
                LIMIT 1
                FOR UPDATE SKIP LOCKED
                """
            )
            row = cur.fetchone()

        if row is None:
            conn.rollback()
            return None

        conn.execute(
            """
            UPDATE analysis_jobs
            SET status = 'processing', locked_at = NOW(), updated_at = NOW()
            WHERE id = %s
            """,
            (row["id"],),
        )
        conn.commit()

        return JobRecord(
            id=row["id"],
            document_id=row["document_id"],
            status="processing",
        )

    def mark_done(self, job_id: int) -> None:
        """Mark a job as done."""
        with get_connection() as conn:
            conn.execute(
                """
                UPDATE analysis_jobs
                SET status = 'done', updated_at = NOW()
                WHERE id = %s
                """,
                (job_id,),
            )
            conn.commit()

    def mark_failed(self, job_id: int, error: str) -> None:
        """Mark a job as permanently failed."""
        with get_connection() as conn:
            conn.execute(
                """
                UPDATE analysis_jobs
                SET status = 'failed', error_message = %s, updated_at = NOW()
                WHERE id = %s
                """,
                (error, job_id),
            )
            conn.commit()

    def find_by_id(self, job_id: int) -> JobRecord | None:
        """Find a job by ID. Useful for tests."""
        return self._find_one("id", job_id)

    def find_by_document_id(self, document_id: int) -> JobRecord | None:
        """Find the job scheduled for a document."""
        return self._find_one("document_id", document_id)

    def _find_one(self, column: str, value: int) -> JobRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_JOB_COLUMNS} FROM analysis_jobs WHERE {column} = %s",
                    (value,),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return JobRecord(
            id=row["id"],
            document_id=row["document_id"],
            status=row["status"],
            error_message=row["error_message"],
            locked_at=row["locked_at"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
