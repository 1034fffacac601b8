import signal
import time
from types import FrameType

from visadocs.config.settings import Settings
from visadocs.database.connection import get_connection
from visadocs.database.models import JobRecord
from visadocs.database.repositories.job_repository import JobRepository
from visadocs.logging.logger import Log
from visadocs.worker.job_runner import JobRunner


class Worker:
    """Claims pending analysis jobs one at a time and hands them to the runner.

    Sleeps for ``job_poll_interval_seconds`` whenever the queue is empty.
    Stops on KeyboardInterrupt, SIGTERM (once the current job is done) or
    after ``max_jobs`` jobs.
    """

    def __init__(
        self,
        job_repo: JobRepository,
        job_runner: JobRunner,
        settings: Settings,
    ) -> None:
        self._job_repo = job_repo
        self._job_runner = job_runner
        self._poll_interval = settings.job_poll_interval_seconds
        self._stopping = False

    def install_signal_handlers(self) -> None:
        signal.signal(signal.SIGTERM, self._handle_sigterm)

    def stop(self) -> None:
        self._stopping = True

    def run(self, max_jobs: int | None = None) -> int:
        """Poll until stopped. Returns the number of jobs run."""
        Log.info("Worker started", poll_interval=self._poll_interval)
        jobs_done = 0
        try:
            while not self._stopping and (max_jobs is None or jobs_done < max_jobs):
                job = self._try_claim_job()
                if job is None:
                    Log.debug("Queue empty, sleeping")
                    time.sleep(self._poll_interval)
                    continue
                self._job_runner.run(job)
                jobs_done += 1
        except KeyboardInterrupt:
            Log.info("Interrupted")
        Log.info("Worker stopped", jobs_done=jobs_done)
        return jobs_done

    def _try_claim_job(self) -> JobRecord | None:
        # A lost connection must not kill the loop; the next poll retries.
        try:
            with get_connection() as conn:
                return self._job_repo.claim_next_job(conn)
        except Exception as exc:
            Log.warning(f"Could not claim a job: {exc}")
            return None

    def _handle_sigterm(self, signum: int, frame: FrameType | None) -> None:
        Log.info("SIGTERM received, finishing current job")
        self.stop()
