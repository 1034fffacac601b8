from abc import ABC, abstractmethod

from visadocs.analysis.models import AnalysisResult


class BaseAnalyzer(ABC):
    """Contract for all document analysis adapters."""

    @abstractmethod
    def analyze(
        self,
        document_type: str,
        file_bytes: bytes,
        *,
        mime_type: str,
        file_name: str,
    ) -> AnalysisResult:
        """Extract structured data from an immigration document.

        Args:
            document_type: One of I-94, I-20, H-1B; selects the prompt.
            file_bytes: Raw file content as stored.
            mime_type: Content type of the file.
            file_name: Original file name, forwarded to the provider.

        Returns:
            AnalysisResult, possibly the degraded fallback when the model
            reply carries no parseable JSON.

        Raises:
            ExtractionError: if no model reply could be obtained, or the
                parsed reply does not match the analysis envelope.
        """
