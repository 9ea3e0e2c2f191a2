"""Domain errors — codes, status categories, construction and classification.

Usage:
    from goformx.errors import ErrorCode, new, status_category

    err = new(ErrorCode.FORM_NOT_FOUND, "form not found")
    status_category(err.code).http_status  # 404
"""

from goformx.errors.codes import ErrorCode, StatusCategory, status_category, http_status
from goformx.errors.domain import (
    DomainError,
    ValidationErrors,
    new,
    wrap,
    wrapf,
    as_domain_error,
    is_error,
    is_error_code,
    get_error_code,
    get_error_message,
    get_error_context,
    get_full_error_message,
    is_validation,
    is_not_found,
    is_form_error,
    is_user_error,
    is_authentication_error,
    is_conflict_error,
    is_forbidden_error,
    is_system_error,
    ERR_FORM_TITLE_REQUIRED,
    ERR_FORM_SCHEMA_REQUIRED,
)

__all__ = [
    "ErrorCode",
    "StatusCategory",
    "status_category",
    "http_status",
    "DomainError",
    "ValidationErrors",
    "new",
    "wrap",
    "wrapf",
    "as_domain_error",
    "is_error",
    "is_error_code",
    "get_error_code",
    "get_error_message",
    "get_error_context",
    "get_full_error_message",
    "is_validation",
    "is_not_found",
    "is_form_error",
    "is_user_error",
    "is_authentication_error",
    "is_conflict_error",
    "is_forbidden_error",
    "is_system_error",
    "ERR_FORM_TITLE_REQUIRED",
    "ERR_FORM_SCHEMA_REQUIRED",
]
