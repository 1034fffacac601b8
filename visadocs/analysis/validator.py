"""Validates a parsed analysis payload against the stored envelope."""

from typing import Any

from visadocs.analysis.exceptions import AnalysisValidationError
from visadocs.analysis.models import AnalysisResult, KeyDate
from visadocs.database.models import IMPORTANCE_LEVELS
from visadocs.logging.logger import Log

_REQUIRED_FIELDS = ("summary", "keyDates", "nextSteps", "warnings", "details")


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate a parsed payload and build an AnalysisResult.

    Keys outside the envelope are dropped and logged at debug level.
    'details' is only required to be present; its contents depend on the
    document type and the model.

    Raises:
        AnalysisValidationError: on any validation failure.
    """
    for name in _REQUIRED_FIELDS:
        if name not in data:
            raise AnalysisValidationError(f"Missing required field: {name}")
    extra_keys = sorted(str(key) for key in data if key not in _REQUIRED_FIELDS)
    if extra_keys:
        Log.debug("Dropping keys outside the analysis envelope", keys=extra_keys)
    summary = data["summary"]
    if not isinstance(summary, str):
        raise AnalysisValidationError("'summary' must be a string")
    return AnalysisResult(
        summary=summary,
        key_dates=_build_key_dates(data["keyDates"]),
        next_steps=_build_strings(data["nextSteps"], "nextSteps"),
        warnings=_build_strings(data["warnings"], "warnings"),
        details=data["details"],
    )


def _build_key_dates(raw: Any) -> list[KeyDate]:
    if not isinstance(raw, list):
        raise AnalysisValidationError("'keyDates' must be a list")
    return [_build_key_date(item, i) for i, item in enumerate(raw)]


def _build_key_date(raw: Any, index: int) -> KeyDate:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"Key date at index {index} must be an object")
    label = raw.get("label")
    if not isinstance(label, str):
        raise AnalysisValidationError(f"Key date at index {index}: 'label' must be a string")
    date = raw.get("date")
    if not isinstance(date, str):
        raise AnalysisValidationError(f"Key date at index {index}: 'date' must be a string")
    importance = raw.get("importance")
    if importance not in IMPORTANCE_LEVELS:
        raise AnalysisValidationError(
            f"Key date at index {index}: 'importance' must be one of "
            f"{list(IMPORTANCE_LEVELS)}, got {importance!r}"
        )
    return KeyDate(label=label, date=date, importance=importance)


def _build_strings(raw: Any, name: str) -> list[str]:
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise AnalysisValidationError(f"'{name}' must be a list of strings")
    return list(raw)
