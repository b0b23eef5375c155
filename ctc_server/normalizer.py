import json
import logging
import re

from .errors import ResponseParseError

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")

KNOWN_STATUSES = ("success", "mismatch")


def strip_code_fence(text):
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned)
    cleaned = _TRAILING_FENCE.sub("", cleaned)
    return cleaned.strip()


def parse_model_response(text):
    """Parse model output into Python data, tolerating a markdown code fence around it."""
    if not isinstance(text, str):
        raise ResponseParseError("Failed to parse AI response as JSON", raw_text=text)
    try:
        return json.loads(strip_code_fence(text))
    except ValueError as e:
        logger.warning("JSON parsing error: %s", e)
        logger.debug("Raw response: %s", text)
        raise ResponseParseError("Failed to parse AI response as JSON", raw_text=text) from e


def parse_salary_result(text):
    """Parse model output and insist on one of the two documented result shapes.

    Anything other than a JSON object whose status is "success" or "mismatch"
    is rejected, so the cascade moves on to the next attempt.
    """
    data = parse_model_response(text)
    if not isinstance(data, dict):
        raise ResponseParseError("AI response is not a JSON object", raw_text=text)
    if data.get("status") not in KNOWN_STATUSES:
        raise ResponseParseError(
            f"Unexpected status in AI response: {data.get('status')!r}", raw_text=text
        )
    return data
