from visadocs.database.models import JobRecord
from visadocs.database.repositories.job_repository import JobRepository
from visadocs.logging.logger import Log
from visadocs.processor.processor import Processor


class JobRunner:
    """Run one analysis job exactly once and record its outcome."""

    def __init__(self, processor: Processor, job_repo: JobRepository) -> None:
        self._processor = processor
        self._job_repo = job_repo

    def run(self, job: JobRecord) -> None:
        """Execute a single job. Errors are recorded on the job, never raised."""
        Log.info("Running analysis job", job_id=job.id, document_id=job.document_id)
        try:
            status = self._processor.process(job.document_id)
            self._job_repo.mark_done(job.id)
            Log.info(
                "Analysis job finished",
                job_id=job.id,
                document_id=job.document_id,
                status=status,
            )
        except Exception as exc:
            self._handle_failure(job, exc)

    def _handle_failure(self, job: JobRecord, exc: Exception) -> None:
        Log.error(f"Analysis job failed: {exc}", job_id=job.id)
        try:
            self._job_repo.mark_failed(job.id, str(exc))
        except Exception as record_exc:
            # The job stays 'processing'; the worker keeps polling.
            Log.error(f"Could not record job failure: {record_exc}", job_id=job.id)
