from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class KeyDate:
    """A single labelled date extracted from a document."""

    label: str
    date: str
    importance: str

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "date": self.date, "importance": self.importance}


@dataclass(frozen=True)
class AnalysisResult:
    """Structured output of document analysis, as persisted on the document."""

    summary: str
    key_dates: list[KeyDate] = field(default_factory=list)
    next_steps: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    details: Any = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the stored JSON layout (camelCase keys)."""
        return {
            "summary": self.summary,
            "keyDates": [key_date.to_dict() for key_date in self.key_dates],
            "nextSteps": list(self.next_steps),
            "warnings": list(self.warnings),
            "details": self.details,
        }
