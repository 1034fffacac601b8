class ExtractionError(Exception):
    """Raised when document analysis fails."""


class ExtractionConfigError(ExtractionError):
    """Raised when the AI provider is not configured (e.g. missing API key)."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AnalysisValidationError(ExtractionError):
    """Raised when a parsed analysis does not match the expected envelope."""
