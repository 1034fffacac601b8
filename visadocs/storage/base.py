from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UploadTarget:
    """A one-time write target for a single file."""

    file_id: str
    upload_url: str
    expires_in_seconds: int


class BaseBlobStorage(ABC):
    """Contract for all blob storage adapters."""

    @abstractmethod
    def generate_upload_target(self) -> UploadTarget:
        """Issue a short-lived, write-capable target for one file.

        Returns:
            UploadTarget whose file_id is later passed to document registration.

        Raises:
            StorageError: if the backend cannot issue a target.
        """

    @abstractmethod
    def resolve_download_url(self, file_id: str) -> str | None:
        """Return a temporary URL for reading the file, or None if it is missing.

        Raises:
            StorageError: on backend failures other than a missing file.
        """
