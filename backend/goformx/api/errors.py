"""Exception handlers — render DomainErrors for API clients and browsers.

API requests (XHR or JSON bodies) get a JSON error body; browser navigation
gets a redirect to the error page carrying the code and message.
"""

import re
from urllib.parse import urlencode

import structlog
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse

from goformx.errors import DomainError
from goformx.errors.translate import translate_to_http
from goformx.models.responses import ErrorResponse

logger = structlog.get_logger()

ERROR_PAGE = "/error"

# Control characters, newlines included
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]+")


def is_api_request(request: Request) -> bool:
    """True for AJAX calls and JSON payloads."""
    if request.headers.get("X-Requested-With") == "XMLHttpRequest":
        return True
    content_type = request.headers.get("Content-Type", "")
    return content_type.split(";")[0].strip() == "application/json"


def sanitize_request_id(value: str) -> str:
    """Collapse a client-supplied trace id onto one clean line."""
    return _CONTROL_CHARS.sub(" ", value).strip()


def _request_identity(request: Request) -> tuple[str, str]:
    request_id = sanitize_request_id(request.headers.get("X-Trace-Id", ""))
    user_id = getattr(request.state, "user_id", "") or ""
    return request_id, str(user_id)


async def domain_error_handler(request: Request, exc: DomainError):
    """Render a DomainError with the status of its code's category."""
    request_id, user_id = _request_identity(request)
    http_error = translate_to_http(exc)

    logger.warning(
        "request_error",
        path=request.url.path,
        method=request.method,
        code=exc.code_value,
        status=http_error.code,
        request_id=request_id,
        user_id=user_id,
    )

    if is_api_request(request):
        body = ErrorResponse(
            code=exc.code_value,
            message=exc.message,
            details=exc.context,
            request_id=request_id,
            user_id=user_id,
        )
        return JSONResponse(status_code=http_error.code, content=jsonable_encoder(body))

    query = urlencode({"code": exc.code_value, "message": exc.message})
    return RedirectResponse(url=f"{ERROR_PAGE}?{query}", status_code=303)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    request_id, user_id = _request_identity(request)
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        request_id=request_id,
    )

    message = "An unexpected error occurred. Please try again."
    if is_api_request(request):
        body = ErrorResponse(
            code="INTERNAL_ERROR",
            message=message,
            request_id=request_id,
            user_id=user_id,
        )
        return JSONResponse(status_code=500, content=jsonable_encoder(body))

    return RedirectResponse(url=f"{ERROR_PAGE}?{urlencode({'message': message})}", status_code=303)
