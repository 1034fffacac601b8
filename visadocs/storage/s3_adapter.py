import uuid
from typing import Any

import boto3
from botocore.exceptions import ClientError

from visadocs.logging.logger import Log
from visadocs.storage.base import BaseBlobStorage, UploadTarget
from visadocs.storage.exceptions import StorageError

_MISSING_OBJECT_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3BlobStorage(BaseBlobStorage):
    """S3-backed storage using presigned PUT and GET URLs."""

    def __init__(
        self,
        *,
        bucket: str,
        region: str,
        url_ttl_seconds: int = 900,
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        client: Any | None = None,
    ) -> None:
        if not bucket:
            raise ValueError("s3_bucket_name is required for storage_backend=s3")
        self._bucket = bucket
        self._url_ttl_seconds = url_ttl_seconds
        self._client = client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    def generate_upload_target(self) -> UploadTarget:
        file_id = f"uploads/{uuid.uuid4().hex}"
        try:
            url = self._client.generate_presigned_url(
                "put_object",
                Params={"Bucket": self._bucket, "Key": file_id},
                ExpiresIn=self._url_ttl_seconds,
            )
        except ClientError as exc:
            Log.error(f"Failed to generate upload URL for {file_id}: {exc}")
            raise StorageError(f"Failed to generate upload URL: {exc}") from exc
        return UploadTarget(
            file_id=file_id,
            upload_url=url,
            expires_in_seconds=self._url_ttl_seconds,
        )

    def resolve_download_url(self, file_id: str) -> str | None:
        try:
            self._client.head_object(Bucket=self._bucket, Key=file_id)
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in _MISSING_OBJECT_CODES:
                return None
            raise StorageError(f"Failed to look up {file_id}: {exc}") from exc

        try:
            return self._client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self._bucket, "Key": file_id},
                ExpiresIn=self._url_ttl_seconds,
            )
        except ClientError as exc:
            raise StorageError(f"Failed to generate download URL: {exc}") from exc
