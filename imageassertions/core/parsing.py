"""Extraction of the verdict JSON from free-form model text.

The brace match is greedy: it spans from the first "{" to the last "}" of the
cleaned text. Unrelated braces before or after the real object end up inside
the span and make it unparseable. That behavior is kept as-is and contained
here.
"""

import json
import logging
import re

from imageassertions.core.errors import ValidationError

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

_FENCE_OPEN = re.compile(r"```json\s*")
_FENCE_CLOSE = re.compile(r"```\s*")
_JSON_SPAN = re.compile(r"\{.*\}", re.DOTALL)


def clean_model_text(text: str) -> str:
    """Drop the first markdown fence markers and all newlines."""
    cleaned = _FENCE_OPEN.sub("", text, count=1)
    cleaned = _FENCE_CLOSE.sub("", cleaned, count=1)
    return cleaned.replace("\n", "").strip()


def extract_json_object(text: str) -> str:
    """
    Locate the JSON object span in noisy model output.

    Args:
        text: Raw text returned by the model

    Returns:
        The substring from the first "{" to the last "}" of the cleaned text

    Raises:
        ValidationError: If the cleaned text contains no brace span
    """
    match = _JSON_SPAN.search(clean_model_text(text))
    if not match:
        logger.error(f"No JSON object in model response: {text[:200]!r}")
        raise ValidationError("Model response did not include a valid JSON block")
    return match.group(0).strip()


def parse_json_object(text: str) -> dict:
    """
    Extract and decode the JSON object from model output.

    Raises:
        ValidationError: If no object is found or it is malformed
    """
    span = extract_json_object(text)
    try:
        return json.loads(span)
    except json.JSONDecodeError as e:
        logger.error(f"Malformed JSON in model response: {span[:200]!r}")
        raise ValidationError(f"Model response contained malformed JSON: {e}") from e
