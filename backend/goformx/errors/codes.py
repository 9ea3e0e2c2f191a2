"""Error codes and status categories.

Every domain failure carries one ErrorCode. The HTTP layer turns a code into a
response class through status_category(), which is total: anything it does not
recognise is treated as a server error.
"""

from enum import Enum
from typing import Optional, Union


class ErrorCode(str, Enum):
    """Closed set of domain error codes.

    Naming convention: FAMILY_SPECIFIC_ISSUE, values are the wire strings.
    """

    # Validation errors
    VALIDATION = "VALIDATION_ERROR"
    REQUIRED = "REQUIRED_FIELD"
    INVALID = "INVALID_VALUE"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_INPUT = "INVALID_INPUT"
    BAD_REQUEST = "BAD_REQUEST"

    # Authentication errors
    UNAUTHORIZED = "UNAUTHORIZED"
    AUTHENTICATION = "AUTHENTICATION_ERROR"

    # Authorization errors
    FORBIDDEN = "FORBIDDEN"
    INSUFFICIENT_ROLE = "INSUFFICIENT_ROLE"

    # Resource errors
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    SERVER_ERROR = "SERVER_ERROR"

    # System errors
    STARTUP = "STARTUP_ERROR"
    SHUTDOWN = "SHUTDOWN_ERROR"
    CONFIG = "CONFIG_ERROR"
    DATABASE = "DATABASE_ERROR"
    TIMEOUT = "TIMEOUT"

    # Form errors
    FORM_VALIDATION = "FORM_VALIDATION_ERROR"
    FORM_NOT_FOUND = "FORM_NOT_FOUND"
    FORM_SUBMISSION = "FORM_SUBMISSION_ERROR"
    FORM_ACCESS_DENIED = "FORM_ACCESS_DENIED"
    FORM_INVALID = "FORM_INVALID"
    FORM_EXPIRED = "FORM_EXPIRED"

    # User errors
    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_EXISTS = "USER_EXISTS"
    USER_DISABLED = "USER_DISABLED"
    USER_INVALID = "USER_INVALID"
    USER_UNAUTHORIZED = "USER_UNAUTHORIZED"


class StatusCategory(str, Enum):
    """Response class a code maps to, independent of the wire protocol."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    GATEWAY_TIMEOUT = "gateway_timeout"

    @property
    def http_status(self) -> int:
        return HTTP_STATUS[self]


HTTP_STATUS = {
    StatusCategory.BAD_REQUEST: 400,
    StatusCategory.UNAUTHORIZED: 401,
    StatusCategory.FORBIDDEN: 403,
    StatusCategory.NOT_FOUND: 404,
    StatusCategory.CONFLICT: 409,
    StatusCategory.SERVER_ERROR: 500,
    StatusCategory.SERVICE_UNAVAILABLE: 503,
    StatusCategory.GATEWAY_TIMEOUT: 504,
}


# ── Families ──

VALIDATION_CODES = frozenset({
    ErrorCode.VALIDATION,
    ErrorCode.REQUIRED,
    ErrorCode.INVALID,
    ErrorCode.INVALID_FORMAT,
    ErrorCode.INVALID_INPUT,
    ErrorCode.BAD_REQUEST,
    ErrorCode.FORM_VALIDATION,
    ErrorCode.FORM_INVALID,
    ErrorCode.FORM_SUBMISSION,
    ErrorCode.FORM_EXPIRED,
    ErrorCode.USER_INVALID,
    ErrorCode.USER_DISABLED,
})

AUTHENTICATION_CODES = frozenset({
    ErrorCode.UNAUTHORIZED,
    ErrorCode.AUTHENTICATION,
    ErrorCode.USER_UNAUTHORIZED,
    ErrorCode.INSUFFICIENT_ROLE,
})

FORBIDDEN_CODES = frozenset({
    ErrorCode.FORBIDDEN,
    ErrorCode.INSUFFICIENT_ROLE,
    ErrorCode.FORM_ACCESS_DENIED,
})

NOT_FOUND_CODES = frozenset({
    ErrorCode.NOT_FOUND,
    ErrorCode.FORM_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND,
})

CONFLICT_CODES = frozenset({
    ErrorCode.CONFLICT,
    ErrorCode.ALREADY_EXISTS,
    ErrorCode.USER_EXISTS,
})

SYSTEM_CODES = frozenset({
    ErrorCode.SERVER_ERROR,
    ErrorCode.DATABASE,
    ErrorCode.CONFIG,
    ErrorCode.STARTUP,
    ErrorCode.SHUTDOWN,
    ErrorCode.TIMEOUT,
})

FORM_CODES = frozenset({
    ErrorCode.FORM_VALIDATION,
    ErrorCode.FORM_NOT_FOUND,
    ErrorCode.FORM_SUBMISSION,
    ErrorCode.FORM_ACCESS_DENIED,
    ErrorCode.FORM_INVALID,
    ErrorCode.FORM_EXPIRED,
})

USER_CODES = frozenset({
    ErrorCode.USER_NOT_FOUND,
    ErrorCode.USER_EXISTS,
    ErrorCode.USER_DISABLED,
    ErrorCode.USER_INVALID,
    ErrorCode.USER_UNAUTHORIZED,
})


# INSUFFICIENT_ROLE sits in the authentication family but maps to forbidden.
STATUS_CATEGORY_MAP = {
    # Bad request
    ErrorCode.VALIDATION: StatusCategory.BAD_REQUEST,
    ErrorCode.REQUIRED: StatusCategory.BAD_REQUEST,
    ErrorCode.INVALID: StatusCategory.BAD_REQUEST,
    ErrorCode.INVALID_FORMAT: StatusCategory.BAD_REQUEST,
    ErrorCode.INVALID_INPUT: StatusCategory.BAD_REQUEST,
    ErrorCode.BAD_REQUEST: StatusCategory.BAD_REQUEST,
    ErrorCode.FORM_VALIDATION: StatusCategory.BAD_REQUEST,
    ErrorCode.FORM_INVALID: StatusCategory.BAD_REQUEST,
    ErrorCode.FORM_SUBMISSION: StatusCategory.BAD_REQUEST,
    ErrorCode.FORM_EXPIRED: StatusCategory.BAD_REQUEST,
    ErrorCode.USER_INVALID: StatusCategory.BAD_REQUEST,
    ErrorCode.USER_DISABLED: StatusCategory.BAD_REQUEST,

    # Unauthorized
    ErrorCode.UNAUTHORIZED: StatusCategory.UNAUTHORIZED,
    ErrorCode.AUTHENTICATION: StatusCategory.UNAUTHORIZED,
    ErrorCode.USER_UNAUTHORIZED: StatusCategory.UNAUTHORIZED,

    # Forbidden
    ErrorCode.FORBIDDEN: StatusCategory.FORBIDDEN,
    ErrorCode.INSUFFICIENT_ROLE: StatusCategory.FORBIDDEN,
    ErrorCode.FORM_ACCESS_DENIED: StatusCategory.FORBIDDEN,

    # Not found
    ErrorCode.NOT_FOUND: StatusCategory.NOT_FOUND,
    ErrorCode.FORM_NOT_FOUND: StatusCategory.NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: StatusCategory.NOT_FOUND,

    # Conflict
    ErrorCode.CONFLICT: StatusCategory.CONFLICT,
    ErrorCode.ALREADY_EXISTS: StatusCategory.CONFLICT,
    ErrorCode.USER_EXISTS: StatusCategory.CONFLICT,

    # Server
    ErrorCode.SERVER_ERROR: StatusCategory.SERVER_ERROR,
    ErrorCode.DATABASE: StatusCategory.SERVER_ERROR,
    ErrorCode.CONFIG: StatusCategory.SERVER_ERROR,

    # Lifecycle
    ErrorCode.STARTUP: StatusCategory.SERVICE_UNAVAILABLE,
    ErrorCode.SHUTDOWN: StatusCategory.SERVICE_UNAVAILABLE,
    ErrorCode.TIMEOUT: StatusCategory.GATEWAY_TIMEOUT,
}


def to_error_code(code: Union[ErrorCode, str, None]) -> Optional[ErrorCode]:
    """Coerce a code or its wire string to an ErrorCode, None if unknown."""
    if isinstance(code, ErrorCode):
        return code
    if not isinstance(code, str):
        return None
    try:
        return ErrorCode(code)
    except ValueError:
        return None


def status_category(code: Union[ErrorCode, str, None]) -> StatusCategory:
    """Map a code to its status category; unknown codes are server errors."""
    known = to_error_code(code)
    if known is None:
        return StatusCategory.SERVER_ERROR
    return STATUS_CATEGORY_MAP.get(known, StatusCategory.SERVER_ERROR)


def http_status(code: Union[ErrorCode, str, None]) -> int:
    """HTTP status for a code."""
    return status_category(code).http_status
