from visadocs.database.connection import get_connection
from visadocs.database.models import DOCUMENT_TYPES
from visadocs.database.repositories.documents_repository import DocumentsRepository
from visadocs.database.repositories.job_repository import JobRepository
from visadocs.logging.logger import Log
from visadocs.services.auth import require_user
from visadocs.services.exceptions import InvalidDocumentTypeError
from visadocs.storage.base import BaseBlobStorage, UploadTarget


class UploadGateway:
    """Issues upload targets and registers uploaded documents for analysis."""

    def __init__(
        self,
        storage: BaseBlobStorage,
        doc_repo: DocumentsRepository,
        job_repo: JobRepository,
    ) -> None:
        self._storage = storage
        self._doc_repo = doc_repo
        self._job_repo = job_repo

    def request_upload_target(self, user_id: int | None) -> UploadTarget:
        """Issue a short-lived write target for one file.

        Raises:
            AuthenticationError: if the caller is not authenticated.
        """
        require_user(user_id)
        return self._storage.generate_upload_target()

    def register_document(
        self,
        user_id: int | None,
        document_type: str,
        file_name: str,
        file_id: str,
    ) -> int:
        """Record an uploaded file and schedule its analysis.

        The document row and its analysis job are committed together; the
        call returns without waiting for the analysis.

        Raises:
            AuthenticationError: if the caller is not authenticated.
            InvalidDocumentTypeError: if the type is not supported.
        """
        owner_id = require_user(user_id)
        if document_type not in DOCUMENT_TYPES:
            raise InvalidDocumentTypeError(
                f"Unsupported document type {document_type!r}. "
                f"Choose from: {list(DOCUMENT_TYPES)}"
            )

        with get_connection() as conn:
            document_id = self._doc_repo.create(
                conn,
                user_id=owner_id,
                document_type=document_type,
                file_name=file_name,
                file_id=file_id,
            )
            job_id = self._job_repo.enqueue(conn, document_id)
            conn.commit()

        Log.info(
            f"Registered {document_type} document {document_id} for user {owner_id}, "
            f"analysis job {job_id} queued"
        )
        return document_id
