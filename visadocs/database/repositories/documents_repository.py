from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from visadocs.database.connection import get_connection
from visadocs.database.models import DocumentRecord
from visadocs.processor.exceptions import DocumentNotFoundError, InvalidStatusTransitionError

_DOCUMENT_COLUMNS = """
    id, user_id, type, file_name, file_id, uploaded_at, status, analysis_result
"""


class DocumentsRepository:
    """Database operations for the documents table."""

    def create(
        self,
        conn: psycopg.Connection[Any],
        *,
        user_id: int,
        document_type: str,
        file_name: str,
        file_id: str,
    ) -> int:
        """Insert a document in the processing state. Caller commits."""
        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO documents (user_id, type, file_name, file_id, status)
                VALUES (%s, %s, %s, %s, 'processing')
                RETURNING id
                """,
                (user_id, document_type, file_name, file_id),
            )
            row = cur.fetchone()
        if row is None:
            raise RuntimeError("Document insert returned no id")
        return int(row[0])

    def find_by_id(self, document_id: int) -> DocumentRecord:
        """Find a document by ID regardless of owner.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_DOCUMENT_COLUMNS} FROM documents WHERE id = %s",
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return _to_record(row)

    def find_owned(self, user_id: int, document_id: int) -> DocumentRecord | None:
        """Find a document only if it belongs to the given user."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_DOCUMENT_COLUMNS}
                    FROM documents
                    WHERE id = %s AND user_id = %s
                    """,
                    (document_id, user_id),
                )
                row = cur.fetchone()

        return _to_record(row) if row is not None else None

    def list_by_user(self, user_id: int) -> list[DocumentRecord]:
        """List a user's documents, newest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_DOCUMENT_COLUMNS}
                    FROM documents
                    WHERE user_id = %s
                    ORDER BY uploaded_at DESC, id DESC
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()

        return [_to_record(row) for row in rows]

    def mark_completed(
        self,
        conn: psycopg.Connection[Any],
        document_id: int,
        analysis_result: dict[str, Any],
    ) -> None:
        """Store the analysis result and move the document to completed. Caller commits.

        Raises:
            InvalidStatusTransitionError: if the document is missing or not processing.
        """
        with conn.cursor() as cur:
            cur.execute(
                """
                UPDATE documents
                SET status = 'completed', analysis_result = %s
                WHERE id = %s AND status = 'processing'
                """,
                (Jsonb(analysis_result), document_id),
            )
            if cur.rowcount == 0:
                raise InvalidStatusTransitionError(
                    f"Document {document_id} is not awaiting analysis"
                )

    def mark_failed(self, document_id: int) -> None:
        """Move the document to failed, leaving no analysis result.

        Raises:
            InvalidStatusTransitionError: if the document is missing or not processing.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE documents
                    SET status = 'failed', analysis_result = NULL
                    WHERE id = %s AND status = 'processing'
                    """,
                    (document_id,),
                )
                if cur.rowcount == 0:
                    raise InvalidStatusTransitionError(
                        f"Document {document_id} is not awaiting analysis"
                    )
            conn.commit()


def _to_record(row: dict[str, Any]) -> DocumentRecord:
    return DocumentRecord(
        id=row["id"],
        user_id=row["user_id"],
        type=row["type"],
        file_name=row["file_name"],
        file_id=row["file_id"],
        uploaded_at=row["uploaded_at"],
        status=row["status"],
        analysis_result=row["analysis_result"],
    )
