"""DomainError — typed error carrying a code, message, cause and context.

Usage:
    err = new(ErrorCode.FORM_NOT_FOUND, "form not found").with_context("form_id", form_id)
    raise err

    if is_not_found(err):
        ...
"""

from typing import Any, Iterator, Optional, Union

from goformx.errors.codes import (
    AUTHENTICATION_CODES,
    CONFLICT_CODES,
    FORBIDDEN_CODES,
    FORM_CODES,
    NOT_FOUND_CODES,
    SYSTEM_CODES,
    USER_CODES,
    VALIDATION_CODES,
    ErrorCode,
    StatusCategory,
    status_category,
    to_error_code,
)


class DomainError(Exception):
    """A domain failure identified by a stable code.

    The context map holds key/value annotations added after construction
    (field names, indexes, limits). It is what the HTTP layer renders as
    ``details``.
    """

    def __init__(
        self,
        code: Union[ErrorCode, str],
        message: str,
        cause: Optional[BaseException] = None,
        context: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = to_error_code(code) or code
        self.message = message
        self.cause = cause
        self.__cause__ = cause
        self.context: dict[str, Any] = dict(context) if context else {}
        self._frozen = False
        self._sentinel: Optional["DomainError"] = None

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.code_value}: {self.message} ({self.cause})"
        return f"{self.code_value}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code_value!r}, message={self.message!r})"

    @property
    def code_value(self) -> str:
        return self.code.value if isinstance(self.code, ErrorCode) else str(self.code)

    @property
    def status_category(self) -> StatusCategory:
        return status_category(self.code)

    @property
    def http_status(self) -> int:
        return self.status_category.http_status

    def with_context(self, key: str, value: Any) -> "DomainError":
        """Add a context entry and return the error for chaining.

        Sentinels are shared, so annotating one yields an annotated copy that
        still matches the sentinel under is_error().
        """
        if self._frozen:
            return self.detach().with_context(key, value)
        self.context[key] = value
        return self

    def detach(self) -> "DomainError":
        """Error safe to raise or annotate.

        Returns self, except for a sentinel: raising mutates __traceback__ and
        __context__, so a sentinel is replaced by a fresh copy linked to it.
        """
        if not self._frozen:
            return self
        copy = DomainError(self.code, self.message, self.cause, self.context)
        copy._sentinel = self
        return copy

    def unwrap(self) -> Optional[BaseException]:
        return self.cause

    def to_response(self) -> dict[str, Any]:
        """Standard error body: code, message, details."""
        return {
            "code": self.code_value,
            "message": self.message,
            "details": dict(self.context),
        }


class ValidationErrors(DomainError):
    """Several independent validation problems reported together."""

    def __init__(self, errors: list[DomainError], message: str = "form validation failed"):
        super().__init__(ErrorCode.FORM_VALIDATION, message)
        self.errors = list(errors)
        self.context["errors"] = [e.to_response() for e in self.errors]

    def __iter__(self) -> Iterator[DomainError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


def new(code: Union[ErrorCode, str], message: str, cause: Optional[BaseException] = None) -> DomainError:
    """Create a domain error with an empty context."""
    return DomainError(code, message, cause)


def wrap(cause: Optional[BaseException], code: Union[ErrorCode, str], message: str) -> DomainError:
    """Create a domain error on top of an underlying failure.

    When the cause is itself a DomainError its context is carried forward as
    is, so the deepest annotations survive re-coding.
    """
    err = DomainError(code, message, cause)
    if isinstance(cause, DomainError):
        err.context = dict(cause.context)
    return err


def wrapf(cause: Optional[BaseException], code: Union[ErrorCode, str], fmt: str, *args: Any) -> DomainError:
    """wrap() with a %-formatted message."""
    return wrap(cause, code, fmt % args if args else fmt)


def _sentinel(code: ErrorCode, message: str) -> DomainError:
    err = DomainError(code, message)
    err._frozen = True
    return err


# ── Chain helpers ──


def iter_chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    """Yield err and every cause below it."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__


def as_domain_error(err: Optional[BaseException]) -> Optional[DomainError]:
    """First DomainError found along the cause chain."""
    for current in iter_chain(err):
        if isinstance(current, DomainError):
            return current
    return None


def is_error(err: Optional[BaseException], target: BaseException) -> bool:
    """True if target (or an annotated copy of it) appears in err's chain."""
    for current in iter_chain(err):
        if current is target:
            return True
        if isinstance(current, DomainError) and current._sentinel is target:
            return True
    return False


def is_error_code(err: Optional[BaseException], code: Union[ErrorCode, str]) -> bool:
    if not isinstance(err, DomainError):
        return False
    return err.code == (to_error_code(code) or code)


def get_error_code(err: Optional[BaseException]) -> str:
    if not isinstance(err, DomainError):
        return ""
    return err.code_value


def get_error_message(err: Optional[BaseException]) -> str:
    if err is None:
        return ""
    if isinstance(err, DomainError):
        return err.message
    return str(err)


def get_error_context(err: Optional[BaseException]) -> Optional[dict[str, Any]]:
    if not isinstance(err, DomainError):
        return None
    return err.context


def get_full_error_message(err: Optional[BaseException]) -> str:
    """Messages from err down through its causes, joined by ': '."""
    messages = []
    for current in iter_chain(err):
        if isinstance(current, DomainError):
            messages.append(current.message)
        else:
            messages.append(str(current))
            break
    return ": ".join(messages)


# ── Category predicates ──


def _in_family(err: Optional[BaseException], codes: frozenset) -> bool:
    domain_err = as_domain_error(err)
    if domain_err is None:
        return False
    return domain_err.code in codes


def is_validation(err: Optional[BaseException]) -> bool:
    return _in_family(err, VALIDATION_CODES)


def is_not_found(err: Optional[BaseException]) -> bool:
    return _in_family(err, NOT_FOUND_CODES)


def is_form_error(err: Optional[BaseException]) -> bool:
    return _in_family(err, FORM_CODES)


def is_user_error(err: Optional[BaseException]) -> bool:
    return _in_family(err, USER_CODES)


def is_authentication_error(err: Optional[BaseException]) -> bool:
    return _in_family(err, AUTHENTICATION_CODES)


def is_conflict_error(err: Optional[BaseException]) -> bool:
    return _in_family(err, CONFLICT_CODES)


def is_forbidden_error(err: Optional[BaseException]) -> bool:
    return _in_family(err, FORBIDDEN_CODES)


def is_system_error(err: Optional[BaseException]) -> bool:
    return _in_family(err, SYSTEM_CODES)


# ── Sentinels ──

# Validation
ERR_VALIDATION = _sentinel(ErrorCode.VALIDATION, "validation error")
ERR_REQUIRED_FIELD = _sentinel(ErrorCode.REQUIRED, "field is required")
ERR_INVALID_FORMAT = _sentinel(ErrorCode.INVALID_FORMAT, "invalid format")
ERR_INVALID_VALUE = _sentinel(ErrorCode.INVALID, "invalid value")
ERR_INVALID_INPUT = _sentinel(ErrorCode.INVALID_INPUT, "invalid input")

# Authentication / authorization
ERR_UNAUTHORIZED = _sentinel(ErrorCode.UNAUTHORIZED, "unauthorized")
ERR_FORBIDDEN = _sentinel(ErrorCode.FORBIDDEN, "forbidden")
ERR_AUTHENTICATION = _sentinel(ErrorCode.AUTHENTICATION, "authentication error")
ERR_INSUFFICIENT_ROLE = _sentinel(ErrorCode.INSUFFICIENT_ROLE, "insufficient role")

# Resources
ERR_NOT_FOUND = _sentinel(ErrorCode.NOT_FOUND, "resource not found")
ERR_CONFLICT = _sentinel(ErrorCode.CONFLICT, "resource conflict")
ERR_BAD_REQUEST = _sentinel(ErrorCode.BAD_REQUEST, "bad request")
ERR_SERVER_ERROR = _sentinel(ErrorCode.SERVER_ERROR, "internal server error")
ERR_ALREADY_EXISTS = _sentinel(ErrorCode.ALREADY_EXISTS, "resource already exists")

# System
ERR_DATABASE = _sentinel(ErrorCode.DATABASE, "database error")
ERR_TIMEOUT = _sentinel(ErrorCode.TIMEOUT, "operation timed out")
ERR_CONFIG = _sentinel(ErrorCode.CONFIG, "configuration error")

# Forms
ERR_FORM_VALIDATION = _sentinel(ErrorCode.FORM_VALIDATION, "form validation error")
ERR_FORM_NOT_FOUND = _sentinel(ErrorCode.FORM_NOT_FOUND, "form not found")
ERR_FORM_SUBMISSION = _sentinel(ErrorCode.FORM_SUBMISSION, "form submission error")
ERR_FORM_ACCESS_DENIED = _sentinel(ErrorCode.FORM_ACCESS_DENIED, "form access denied")
ERR_FORM_INVALID = _sentinel(ErrorCode.FORM_INVALID, "invalid form")
ERR_FORM_EXPIRED = _sentinel(ErrorCode.FORM_EXPIRED, "form has expired")
ERR_FORM_TITLE_REQUIRED = _sentinel(ErrorCode.FORM_INVALID, "form title is required")
ERR_FORM_SCHEMA_REQUIRED = _sentinel(ErrorCode.FORM_INVALID, "form schema is required")

# Users
ERR_USER_NOT_FOUND = _sentinel(ErrorCode.USER_NOT_FOUND, "user not found")
ERR_USER_EXISTS = _sentinel(ErrorCode.USER_EXISTS, "user already exists")
ERR_USER_DISABLED = _sentinel(ErrorCode.USER_DISABLED, "user is disabled")
ERR_USER_INVALID = _sentinel(ErrorCode.USER_INVALID, "invalid user")
ERR_USER_UNAUTHORIZED = _sentinel(ErrorCode.USER_UNAUTHORIZED, "user is not authorized")
