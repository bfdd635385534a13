"""Human-readable messages for failed backend calls."""
import json
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."
GENERIC_TRANSPORT_MESSAGE = "Request failed"


def extract_message(status_code: int, body: Optional[str], reason: Optional[str] = None) -> str:
    """
    Extract a message from a failed HTTP response.

    Args:
        status_code: HTTP status of the response
        body: Raw response body, if any (expected envelope: {"error": "message"})
        reason: Reason phrase; defaults to the standard phrase for the status

    Returns:
        The session-expired message for 401, otherwise the envelope's non-blank
        "error" string, otherwise "HTTP <code>: <reason>".
    """
    if status_code == 401:
        return SESSION_EXPIRED_MESSAGE

    if body:
        try:
            data = json.loads(body)
        except ValueError:
            data = None
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, str) and error.strip():
                return error

    reason = reason or httpx.codes.get_reason_phrase(status_code) or GENERIC_TRANSPORT_MESSAGE
    return f"HTTP {status_code}: {reason}"


def describe_exception(exc: BaseException) -> str:
    """Turn any failure of a backend call into a message for the UI."""
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        return extract_message(response.status_code, response.text, response.reason_phrase)
    if isinstance(exc, ValidationError):
        logger.warning("Malformed response from backend: %s", exc)
        return f"Unexpected response from server ({exc.error_count()} invalid field(s))."
    return str(exc) or UNEXPECTED_ERROR_MESSAGE
