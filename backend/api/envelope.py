"""Uniform JSON response envelope for the users API.

Every response is ``{"success": bool, "message": str, "result"?: ...}``.
``result`` is omitted when an operation has nothing to return.
"""

from typing import Any, Dict, Optional, Tuple

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from domain.user.core.exceptions.user_errors import (
    ErrorKind,
    UserDomainError,
    UserValidationError,
)

_NO_RESULT: Any = object()

# Status and fixed message per error kind; validation messages come from the rule.
ERROR_RESPONSES: Dict[ErrorKind, Tuple[int, str]] = {
    ErrorKind.MALFORMED_BODY: (status.HTTP_400_BAD_REQUEST, "malformed body"),
    ErrorKind.INVALID_ID_FORMAT: (status.HTTP_400_BAD_REQUEST, "format error"),
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, ""),
    ErrorKind.CONFLICT: (status.HTTP_409_CONFLICT, "account or email already in use"),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "not found"),
    ErrorKind.UNKNOWN: (status.HTTP_500_INTERNAL_SERVER_ERROR, "unknown error"),
}


class Envelope(BaseModel):
    """Response model shared by every endpoint."""

    success: bool
    message: str = ""
    result: Optional[Any] = None


def envelope_response(
    status_code: int,
    success: bool,
    message: str = "",
    result: Any = _NO_RESULT,
) -> JSONResponse:
    """Build a JSONResponse wrapping ``result`` in the envelope."""
    if result is _NO_RESULT:
        body = Envelope(success=success, message=message)
    else:
        body = Envelope(success=success, message=message, result=result)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_unset=True))


def error_response(error: UserDomainError) -> JSONResponse:
    """Translate a domain error into its status code and fixed message."""
    status_code, message = ERROR_RESPONSES.get(error.kind, ERROR_RESPONSES[ErrorKind.UNKNOWN])
    if isinstance(error, UserValidationError):
        message = error.message
    return envelope_response(status_code, False, message)


def unknown_error_response() -> JSONResponse:
    status_code, message = ERROR_RESPONSES[ErrorKind.UNKNOWN]
    return envelope_response(status_code, False, message)
