from visadocs.config.settings import Settings
from visadocs.database.connection import apply_schema, close_pool, init_pool
from visadocs.database.repositories.job_repository import JobRepository
from visadocs.logging.logger import Log
from visadocs.processor.processor import Processor, build_processor
from visadocs.worker.job_runner import JobRunner
from visadocs.worker.worker import Worker


def main() -> None:
    """Entry point: initialize pool -> apply schema -> build dependencies -> start worker loop."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    processor: Processor | None = None
    try:
        apply_schema()
        processor = build_processor(settings)
        job_repo = JobRepository()
        job_runner = JobRunner(processor, job_repo)
        worker = Worker(job_repo, job_runner, settings)
        worker.install_signal_handlers()
        worker.run()
    finally:
        if processor is not None:
            processor.close()
        close_pool()


if __name__ == "__main__":
    main()
