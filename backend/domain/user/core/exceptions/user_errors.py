"""User domain exceptions.

Every exception carries an ``ErrorKind`` so callers can discriminate on an
explicit tag instead of inspecting messages or driver error codes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories exposed by the users API."""

    MALFORMED_BODY = "malformed_body"
    INVALID_ID_FORMAT = "invalid_id_format"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class MalformedBodyError(UserDomainError):
    """Request body could not be decoded into a JSON object."""

    kind = ErrorKind.MALFORMED_BODY

    def __init__(self, reason: str = "body is not a JSON object"):
        self.reason = reason
        super().__init__(f"Malformed body: {reason}")


class InvalidUserIdError(UserDomainError, ValueError):
    """Identifier is not a well-formed store id."""

    kind = ErrorKind.INVALID_ID_FORMAT

    def __init__(self, value: object):
        """Initialize with the rejected identifier.

        Args:
            value: Raw identifier as received
        """
        self.value = value
        super().__init__(f"Invalid user id format: {value!r}")


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User ID that was not found
        """
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class UserConflictError(UserDomainError):
    """Account or email already belongs to another user."""

    kind = ErrorKind.CONFLICT

    def __init__(self, detail: str = "account or email already in use"):
        self.detail = detail
        super().__init__(detail)


class UserValidationError(UserDomainError):
    """A field rule rejected the document.

    Only the first failing rule is reported, so ``field`` and ``message``
    always describe a single violation.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str):
        """Initialize with the failing field and its configured message.

        Args:
            field: Name of the field that failed
            message: User-facing message of the failing rule
        """
        self.field = field
        self.message = message
        super().__init__(message)
