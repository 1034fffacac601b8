from dataclasses import dataclass


@dataclass(frozen=True)
class LoadedFile:
    """Bytes of a stored document together with their content type."""

    content: bytes
    mime_type: str
