from visadocs.database.models import DocumentRecord
from visadocs.database.repositories.documents_repository import DocumentsRepository
from visadocs.services.models import DocumentView
from visadocs.storage.base import BaseBlobStorage


class DocumentsService:
    """Read access to a user's documents."""

    def __init__(self, doc_repo: DocumentsRepository, storage: BaseBlobStorage) -> None:
        self._doc_repo = doc_repo
        self._storage = storage

    def list_documents(self, user_id: int | None) -> list[DocumentRecord]:
        """List the caller's documents, newest first. Empty when unauthenticated."""
        if user_id is None:
            return []
        return self._doc_repo.list_by_user(user_id)

    def get_document(self, user_id: int | None, document_id: int) -> DocumentView | None:
        """Fetch one of the caller's documents with a file URL.

        Returns None when unauthenticated, when the document does not exist,
        and when it belongs to another user.
        """
        if user_id is None:
            return None
        document = self._doc_repo.find_owned(user_id, document_id)
        if document is None:
            return None
        return DocumentView(
            document=document,
            file_url=self._storage.resolve_download_url(document.file_id),
        )
