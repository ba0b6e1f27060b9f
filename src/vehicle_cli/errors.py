"""Normalise failures into a single displayable shape."""

from __future__ import annotations

import enum
import json
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional, TextIO

import httpx

from .logging import get_logger

NO_RESPONSE_MESSAGE = "No response from server. Please check if the server is running."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"

_SETUP_ERRORS = (httpx.InvalidURL, httpx.UnsupportedProtocol, httpx.CookieConflict, httpx.StreamError)


@dataclass(frozen=True)
class ApiError:
    """Display-ready description of a failed call."""

    message: str
    status_code: Optional[int] = None
    details: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"message": self.message}
        if self.status_code is not None:
            result["status_code"] = self.status_code
        if self.details is not None:
            result["details"] = self.details
        return result


class ErrorKind(enum.Enum):
    HAS_RESPONSE = "has_response"
    HAS_REQUEST_ONLY = "has_request_only"
    SETUP_ONLY = "setup_only"
    GENERIC = "generic"
    UNKNOWN = "unknown"


def _has_request(error: httpx.RequestError) -> bool:
    try:
        error.request
    except RuntimeError:
        return False
    return True


def classify_error(error: object) -> ErrorKind:
    """Return the first matching kind, checked from most to least specific."""

    if isinstance(error, httpx.HTTPStatusError):
        return ErrorKind.HAS_RESPONSE
    if isinstance(error, _SETUP_ERRORS):
        return ErrorKind.SETUP_ONLY
    if isinstance(error, httpx.RequestError):
        return ErrorKind.HAS_REQUEST_ONLY if _has_request(error) else ErrorKind.SETUP_ONLY
    if isinstance(error, Exception):
        return ErrorKind.GENERIC
    return ErrorKind.UNKNOWN


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (ValueError, httpx.ResponseNotRead):
        pass
    try:
        text = response.text
    except httpx.ResponseNotRead:
        return None
    return text or None


def _from_response(error: httpx.HTTPStatusError) -> ApiError:
    body = _response_body(error.response)
    if isinstance(body, dict) and "message" in body:
        message = str(body["message"])
    else:
        message = str(error)
    return ApiError(message=message, status_code=error.response.status_code, details=body)


def format_error(error: object) -> ApiError:
    """Map any raised value onto an :class:`ApiError`. Never raises."""

    kind = classify_error(error)
    if kind is ErrorKind.HAS_RESPONSE:
        return _from_response(error)  # type: ignore[arg-type]
    if kind is ErrorKind.HAS_REQUEST_ONLY:
        return ApiError(message=NO_RESPONSE_MESSAGE, details=str(error))
    if kind is ErrorKind.SETUP_ONLY:
        return ApiError(message=str(error))
    if kind is ErrorKind.GENERIC:
        return ApiError(message=str(error))
    return ApiError(message=UNKNOWN_ERROR_MESSAGE, details=error)


def _is_structured(value: Any) -> bool:
    return value is not None and not isinstance(value, (str, bytes, int, float, bool))


def _serialize(value: Any) -> str:
    try:
        return json.dumps(value, indent=2, default=str)
    except (TypeError, ValueError):
        return repr(value)


def display_error(error: object, stream: Optional[TextIO] = None) -> None:
    """Write a formatted error report to stderr."""

    out = stream if stream is not None else sys.stderr
    api_error = format_error(error)
    get_logger("vehicle_cli.errors").debug(
        "Command failed",
        extra={"error_type": type(error).__name__, "status_code": api_error.status_code},
    )

    lines = [f"\nError: {api_error.message}"]
    if api_error.status_code is not None:
        lines.append(f"   Status Code: {api_error.status_code}")
    if _is_structured(api_error.details):
        lines.append(f"   Details: {_serialize(api_error.details)}")
    lines.append("")
    out.write("\n".join(lines) + "\n")
