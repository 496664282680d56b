"""Parse text-generation output into a validated MatchOutput."""

import json
import logging

from pydantic import ValidationError

from models.schemas.match_output import MatchOutput
from services.errors import SchemaMismatch

logger = logging.getLogger(__name__)


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def parse_match_output(raw: str) -> MatchOutput:
    """Validate a raw response.

    Raises SchemaMismatch when the text is not JSON, is not an object, misses
    a required field, or carries a score that is non-numeric or outside 0-100.
    """
    text = _strip_code_fences(raw or "")
    if not text:
        raise SchemaMismatch("empty response")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaMismatch(f"response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise SchemaMismatch(f"expected a JSON object, got {type(payload).__name__}")

    try:
        return MatchOutput.model_validate(payload)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise SchemaMismatch(f"invalid fields: {', '.join(fields)}") from e
