from visadocs.analysis.base import BaseAnalyzer
from visadocs.analysis.factory import AnalyzerFactory
from visadocs.analysis.models import AnalysisResult
from visadocs.config.settings import Settings
from visadocs.database.connection import get_connection
from visadocs.database.models import (
    STATUS_COMPLETED,
    STATUS_FAILED,
    STATUS_PROCESSING,
    DocumentRecord,
    NewDeadline,
)
from visadocs.database.repositories.deadlines_repository import DeadlinesRepository
from visadocs.database.repositories.documents_repository import DocumentsRepository
from visadocs.logging.logger import Log
from visadocs.processor.deadline_fanout import build_deadlines_from_key_dates
from visadocs.processor.exceptions import InvalidStatusTransitionError
from visadocs.processor.file_loader import FileLoader
from visadocs.storage.base import BaseBlobStorage
from visadocs.storage.factory import BlobStorageFactory


class Processor:
    """Runs the analysis of one document to a terminal state.

    Pipeline: load -> fetch file -> analyze -> persist result + deadlines.
    Any failure before a result is persisted marks the document failed.
    """

    def __init__(
        self,
        file_loader: FileLoader,
        doc_repo: DocumentsRepository,
        deadline_repo: DeadlinesRepository,
        analyzer: BaseAnalyzer,
    ) -> None:
        self._file_loader = file_loader
        self._doc_repo = doc_repo
        self._deadline_repo = deadline_repo
        self._analyzer = analyzer

    def close(self) -> None:
        self._file_loader.close()

    def process(self, document_id: int) -> str:
        """Analyze a document and return its terminal status.

        Raises:
            DocumentNotFoundError: if the document does not exist.
            InvalidStatusTransitionError: if the document already left processing.
        """
        Log.info("Processing document", document_id=document_id)
        document = self._doc_repo.find_by_id(document_id)
        if document.status != STATUS_PROCESSING:
            raise InvalidStatusTransitionError(
                f"Document {document_id} is already {document.status}"
            )

        try:
            result = self._analyze(document)
            deadlines = build_deadlines_from_key_dates(
                result.key_dates,
                user_id=document.user_id,
                document_id=document.id,
            )
            self._persist_completed(document.id, result, deadlines)
        except Exception as exc:
            Log.error(f"Analysis failed: {exc}", document_id=document_id)
            self._doc_repo.mark_failed(document_id)
            return STATUS_FAILED

        Log.info(
            f"Document {document_id} completed: {len(deadlines)} deadlines created"
        )
        return STATUS_COMPLETED

    def _analyze(self, document: DocumentRecord) -> AnalysisResult:
        loaded = self._file_loader.load(document)
        Log.info(
            f"Loaded {len(loaded.content)} bytes ({loaded.mime_type}) "
            f"for document {document.id}"
        )
        return self._analyzer.analyze(
            document.type,
            loaded.content,
            mime_type=loaded.mime_type,
            file_name=document.file_name,
        )

    def _persist_completed(
        self,
        document_id: int,
        result: AnalysisResult,
        deadlines: list[NewDeadline],
    ) -> None:
        with get_connection() as conn:
            self._doc_repo.mark_completed(conn, document_id, result.to_dict())
            self._deadline_repo.insert_many(conn, deadlines)
            conn.commit()


def build_processor(
    settings: Settings,
    storage: BaseBlobStorage | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    storage = storage if storage is not None else BlobStorageFactory.create(settings)
    return Processor(
        file_loader=FileLoader(storage, timeout_seconds=settings.file_fetch_timeout_seconds),
        doc_repo=DocumentsRepository(),
        deadline_repo=DeadlinesRepository(),
        analyzer=AnalyzerFactory.create(settings),
    )
