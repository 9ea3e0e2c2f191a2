"""Translate domain errors into HTTP-shaped values."""

from typing import Optional

from goformx.errors.codes import ErrorCode, StatusCategory, STATUS_CATEGORY_MAP
from goformx.errors.domain import as_domain_error
from goformx.models.responses import ErrorCodeInfo, HTTPError


def translate_to_http(err: Optional[BaseException]) -> Optional[HTTPError]:
    """Map any error to an HTTPError; non-domain errors become a bare 500."""
    if err is None:
        return None

    domain_err = as_domain_error(err)
    if domain_err is None:
        return HTTPError(
            code=StatusCategory.SERVER_ERROR.http_status,
            message="Internal server error",
        )

    return HTTPError(
        code=domain_err.http_status,
        message=domain_err.message,
        details=domain_err.context or None,
    )


def error_code_table() -> list[ErrorCodeInfo]:
    """Every known code with its category and HTTP status."""
    return [
        ErrorCodeInfo(
            code=code.value,
            category=STATUS_CATEGORY_MAP[code].value,
            http_status=STATUS_CATEGORY_MAP[code].http_status,
        )
        for code in ErrorCode
    ]

