class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DocumentNotFoundError(ProcessorError):
    """Raised when a document cannot be found in the database."""


class InvalidStatusTransitionError(ProcessorError):
    """Raised when a document is no longer in the processing state."""


class FileReadError(ProcessorError):
    """Raised when the stored file cannot be resolved or fetched."""
