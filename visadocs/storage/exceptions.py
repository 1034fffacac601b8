class StorageError(Exception):
    """Raised when the blob storage backend fails."""
