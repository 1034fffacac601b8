"""Best-effort extraction of the JSON envelope from free-text model output."""

import json
import math
import re
from typing import Any

from visadocs.logging.logger import Log

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)

SUMMARY_PREVIEW_CHARS = 200
EMPTY_RESPONSE_SUMMARY = "The document could not be analyzed: the model returned no text."
FALLBACK_NEXT_STEPS = (
    "Review the document carefully",
    "Consult with an immigration attorney",
)
FALLBACK_WARNING = "Unable to fully parse document. Please review manually."


def parse_analysis_text(text: str) -> dict[str, Any]:
    """Return the JSON object embedded in the model reply, or a fallback payload.

    Matches greedily from the first '{' to the last '}' and parses strictly:
    NaN and Infinity are rejected. NUL characters are removed everywhere,
    since jsonb cannot store them.
    Never raises: malformed or missing JSON yields the degraded payload.
    """
    text = text.replace("\x00", "")
    match = _JSON_OBJECT.search(text)
    if match is not None:
        try:
            parsed = json.loads(
                match.group(0),
                parse_constant=_reject_constant,
                parse_float=_parse_finite_float,
            )
        except ValueError as exc:
            Log.warning(f"Failed to parse analysis JSON: {exc}")
        else:
            if isinstance(parsed, dict):
                return _strip_nul(parsed)
    return fallback_payload(text)


def fallback_payload(text: str) -> dict[str, Any]:
    """Degraded analysis for replies without usable JSON."""
    text = text.replace("\x00", "")
    summary = (
        f"{text[:SUMMARY_PREVIEW_CHARS]}..." if text.strip() else EMPTY_RESPONSE_SUMMARY
    )
    return {
        "summary": summary,
        "keyDates": [],
        "nextSteps": list(FALLBACK_NEXT_STEPS),
        "warnings": [FALLBACK_WARNING],
        "details": {"rawText": text},
    }


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def _strip_nul(value: Any) -> Any:
    # Escaped \u0000 survives the raw-text replace and decodes to NUL.
    if isinstance(value, str):
        return value.replace("\x00", "")
    if isinstance(value, dict):
        return {_strip_nul(key): _strip_nul(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_strip_nul(item) for item in value]
    return value
