import mimetypes
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx

from visadocs.database.models import DocumentRecord
from visadocs.processor.exceptions import FileReadError
from visadocs.processor.models import LoadedFile
from visadocs.storage.base import BaseBlobStorage

DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(file_name: str, header: str | None = None) -> str:
    """Pick a content type from a response header, else from the file name."""
    if header:
        mime_type = header.split(";", 1)[0].strip().lower()
        if mime_type and mime_type != DEFAULT_MIME_TYPE:
            return mime_type
    guessed, _ = mimetypes.guess_type(file_name)
    return guessed or DEFAULT_MIME_TYPE


class FileLoader:
    """Resolves a download URL for a document and fetches its bytes."""

    def __init__(
        self,
        storage: BaseBlobStorage,
        timeout_seconds: int = 30,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._storage = storage
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(
            timeout=timeout_seconds, follow_redirects=True
        )

    def close(self) -> None:
        """Close the HTTP client if this loader created it."""
        if self._owns_http:
            self._http.close()

    def load(self, document: DocumentRecord) -> LoadedFile:
        """Fetch the stored file of a document.

        Raises:
            FileReadError: if the file has no download URL or cannot be fetched.
            StorageError: if the storage backend fails while resolving the URL.
        """
        url = self._storage.resolve_download_url(document.file_id)
        if url is None:
            raise FileReadError(f"File not found: {document.file_id}")
        if url.startswith("file://"):
            return self._read_local(url, document.file_name)
        return self._fetch_remote(url, document.file_name)

    def _read_local(self, url: str, file_name: str) -> LoadedFile:
        path = Path(url2pathname(urlparse(url).path))
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return LoadedFile(content=content, mime_type=guess_mime_type(file_name))

    def _fetch_remote(self, url: str, file_name: str) -> LoadedFile:
        try:
            response = self._http.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise FileReadError(f"Failed to fetch stored file: {exc}") from exc
        return LoadedFile(
            content=response.content,
            mime_type=guess_mime_type(file_name, response.headers.get("content-type")),
        )
