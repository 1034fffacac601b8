from pathlib import Path

from visadocs.config.settings import Settings
from visadocs.storage.base import BaseBlobStorage
from visadocs.storage.local_adapter import LocalBlobStorage
from visadocs.storage.s3_adapter import S3BlobStorage


class BlobStorageFactory:
    """Creates the blob storage adapter selected in settings."""

    BACKENDS = ("local", "s3")

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStorage:
        backend = settings.storage_backend.lower()
        if backend == "local":
            return LocalBlobStorage(
                Path(settings.storage_local_root),
                url_ttl_seconds=settings.storage_url_ttl_seconds,
            )
        if backend == "s3":
            return S3BlobStorage(
                bucket=settings.s3_bucket_name,
                region=settings.s3_region,
                url_ttl_seconds=settings.storage_url_ttl_seconds,
                endpoint_url=settings.s3_endpoint_url,
                access_key_id=settings.aws_access_key_id,
                secret_access_key=settings.aws_secret_access_key,
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
