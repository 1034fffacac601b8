from abc import ABC, abstractmethod


class BaseExtractionClient(ABC):
    """Contract for provider-specific extraction AI clients."""

    @abstractmethod
    def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        file_base64: str,
        mime_type: str,
        file_name: str,
    ) -> str:
        """Send the file and prompt to the model and return its reply as plain text."""
