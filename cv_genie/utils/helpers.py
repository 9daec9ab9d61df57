"""Helper utilities for handling text-generation output."""

import json
import re
from typing import Any, Dict, List

from pydantic import ValidationError

from cv_genie.errors import SchemaViolation

_OPENING_FENCE = re.compile(r"^```[a-zA-Z]*\s*")
_CLOSING_FENCE = re.compile(r"\s*```$")


def strip_code_fences(text: str) -> str:
    """Trim the response and remove a markdown code block wrapped around it."""
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = _OPENING_FENCE.sub("", raw)
        raw = _CLOSING_FENCE.sub("", raw)
    return raw.strip()


def parse_llm_json(text: str, stage: str) -> Dict[str, Any]:
    """
    Parse a single JSON object from model output, stripping code fences first.
    Raises SchemaViolation when the cleaned text is not exactly one JSON object;
    prose around the object is not tolerated.
    """
    raw = strip_code_fences(text)
    if not raw:
        raise SchemaViolation(stage, "empty response")
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SchemaViolation(stage, f"invalid JSON ({e.msg} at line {e.lineno} column {e.colno})") from e
    if not isinstance(parsed, dict):
        raise SchemaViolation(stage, f"expected a JSON object, got {type(parsed).__name__}")
    return parsed


def describe_validation_errors(error: ValidationError, limit: int = 5) -> List[str]:
    """Short 'field.path: message' lines for a pydantic ValidationError."""
    lines = []
    for err in error.errors()[:limit]:
        location = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        lines.append(f"{location}: {err.get('msg', 'invalid value')}")
    return lines
