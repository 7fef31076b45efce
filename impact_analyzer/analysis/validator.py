"""Validates the analysis service response body."""

import json
from typing import Any

from impact_analyzer.analysis.exceptions import AnalysisProtocolError

RESULT_FIELD = "text"


def parse_analysis_response(raw: str) -> str:
    """Extract the narrative text from a raw JSON response body.

    Raises:
        AnalysisProtocolError: if the body is not a JSON object with a string result field.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AnalysisProtocolError(f"Invalid JSON response: {exc}") from exc
    return extract_text(data)


def extract_text(data: Any) -> str:
    if not isinstance(data, dict):
        raise AnalysisProtocolError("JSON response must be an object")
    if RESULT_FIELD not in data:
        raise AnalysisProtocolError(f"Missing required field: {RESULT_FIELD}")
    text = data[RESULT_FIELD]
    if not isinstance(text, str):
        raise AnalysisProtocolError(f"'{RESULT_FIELD}' must be a string")
    return text


def extract_error_detail(raw: str) -> str:
    """Best-effort ``error`` field of a failed response, falling back to the raw body."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return raw.strip()
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return raw.strip()
