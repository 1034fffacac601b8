import uuid
from pathlib import Path

from visadocs.storage.base import BaseBlobStorage, UploadTarget


class LocalBlobStorage(BaseBlobStorage):
    """Filesystem-backed storage addressed by file:// URLs.

    Files live flat under the root directory, named by their file_id.
    """

    def __init__(self, root: Path, url_ttl_seconds: int = 900) -> None:
        self._root = root.resolve()
        self._url_ttl_seconds = url_ttl_seconds

    def generate_upload_target(self) -> UploadTarget:
        self._root.mkdir(parents=True, exist_ok=True)
        file_id = uuid.uuid4().hex
        return UploadTarget(
            file_id=file_id,
            upload_url=(self._root / file_id).as_uri(),
            expires_in_seconds=self._url_ttl_seconds,
        )

    def resolve_download_url(self, file_id: str) -> str | None:
        path = self._resolve_path(file_id)
        if path is None or not path.is_file():
            return None
        return path.as_uri()

    def _resolve_path(self, file_id: str) -> Path | None:
        if not file_id or "/" in file_id or "\\" in file_id or file_id in (".", ".."):
            return None
        return self._root / file_id
