from unittest.mock import MagicMock

from visadocs.database.models import DocumentRecord
from visadocs.services.documents_service import DocumentsService
from visadocs.services.models import DocumentView


def _make_document(document_id: int, user_id: int = 42) -> DocumentRecord:
    return DocumentRecord(
        id=document_id,
        user_id=user_id,
        type="H-1B",
        file_name=f"doc-{document_id}.pdf",
        file_id=f"file-{document_id}",
        status="completed",
    )


def _make_service() -> tuple[DocumentsService, MagicMock, MagicMock]:
    doc_repo = MagicMock()
    storage = MagicMock()
    return DocumentsService(doc_repo, storage), doc_repo, storage


class TestListDocuments:
    def test_returns_repository_order(self) -> None:
        service, doc_repo, _storage = _make_service()
        newest, older = _make_document(2), _make_document(1)
        doc_repo.list_by_user.return_value = [newest, older]

        assert service.list_documents(42) == [newest, older]
        doc_repo.list_by_user.assert_called_once_with(42)

    def test_unauthenticated_caller_gets_empty_list(self) -> None:
        service, doc_repo, _storage = _make_service()

        assert service.list_documents(None) == []
        doc_repo.list_by_user.assert_not_called()


class TestGetDocument:
    def test_returns_document_with_file_url(self) -> None:
        service, doc_repo, storage = _make_service()
        document = _make_document(5)
        doc_repo.find_owned.return_value = document
        storage.resolve_download_url.return_value = "https://files/file-5"

        view = service.get_document(42, 5)

        assert view == DocumentView(document=document, file_url="https://files/file-5")
        doc_repo.find_owned.assert_called_once_with(42, 5)
        storage.resolve_download_url.assert_called_once_with("file-5")

    def test_missing_file_yields_no_url(self) -> None:
        service, doc_repo, storage = _make_service()
        doc_repo.find_owned.return_value = _make_document(5)
        storage.resolve_download_url.return_value = None

        view = service.get_document(42, 5)

        assert view is not None
        assert view.file_url is None

    def test_foreign_document_is_indistinguishable_from_missing(self) -> None:
        service, doc_repo, storage = _make_service()
        doc_repo.find_owned.return_value = None

        assert service.get_document(99, 5) is None
        storage.resolve_download_url.assert_not_called()

    def test_unauthenticated_caller_gets_none(self) -> None:
        service, doc_repo, _storage = _make_service()

        assert service.get_document(None, 5) is None
        doc_repo.find_owned.assert_not_called()
