class ServiceError(Exception):
    """Base exception for errors surfaced to foreground callers."""


class AuthenticationError(ServiceError):
    """Raised when a mutation is attempted without a caller identity."""


class NotFoundOrForbiddenError(ServiceError):
    """Raised when a record is absent or owned by someone else.

    Both cases share one outcome so record existence is never revealed.
    """


class DeadlineNotFoundError(NotFoundOrForbiddenError):
    """Raised when a deadline is absent or not owned by the caller."""


class InvalidDocumentTypeError(ServiceError):
    """Raised when a document type is not one of I-94, I-20, H-1B."""


class InvalidImportanceError(ServiceError):
    """Raised when an importance is not one of critical, important, info."""
