"""Form Definition Validator — decides whether a form is fit to persist.

Rules run in a fixed order: title, description, schema presence, schema
shape. validate() stops at the first failing rule; validate_all() runs every
rule and reports all problems together.

Usage:
    validator = FormDefinitionValidator()
    error = validator.validate(form)
    if error is not None:
        return error.to_response()
"""

import time
from typing import Iterator, Optional, Union

import structlog

from goformx.config import get_settings
from goformx.errors import (
    DomainError,
    ErrorCode,
    ValidationErrors,
    ERR_FORM_SCHEMA_REQUIRED,
    ERR_FORM_TITLE_REQUIRED,
    new,
    wrap,
)
from goformx.forms.model import (
    FormDefinition,
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    MIN_TITLE_LENGTH,
)
from goformx.validators.dialects import (
    SchemaDialect,
    get_schema_validator,
    parse_dialect,
    resolve_dialect,
)

logger = structlog.get_logger()


class FormDefinitionValidator:
    """Validates title, description and schema of a FormDefinition.

    Stateless: one instance can be shared across threads. The form is only
    read, never modified.
    """

    def __init__(self, dialect: Optional[Union[SchemaDialect, str]] = None):
        """Initialize with a schema dialect.

        Args:
            dialect: Schema dialect to enforce. If None, uses SCHEMA_DIALECT from settings.
        """
        self.dialect = parse_dialect(dialect or get_settings().SCHEMA_DIALECT)

    def validate(self, form: FormDefinition) -> Optional[DomainError]:
        """Fail-fast validation.

        Returns:
            None if the form is valid, otherwise the error of the first failing rule
        """
        start_time = time.perf_counter()
        error = next(self._iter_problems(form), None)
        self._log(form, [error] if error else [], start_time)
        return error

    def validate_all(self, form: FormDefinition) -> Optional[ValidationErrors]:
        """Run every rule and collect all problems into one error.

        Returns:
            None if the form is valid, otherwise a ValidationErrors holding each problem
        """
        start_time = time.perf_counter()
        errors = list(self._iter_problems(form))
        self._log(form, errors, start_time)
        if not errors:
            return None
        return ValidationErrors(errors)

    def ensure_valid(self, form: FormDefinition, collect_all: bool = False) -> FormDefinition:
        """Raise the validation error, or return the form unchanged."""
        error = self.validate_all(form) if collect_all else self.validate(form)
        if error is not None:
            raise error.detach()
        return form

    # ── Rules ──

    def _iter_problems(self, form: FormDefinition) -> Iterator[DomainError]:
        yield from self._title_problems(form.title)
        yield from self._description_problems(form.description)
        yield from self._schema_problems(form.form_schema)

    def _title_problems(self, title: str) -> Iterator[DomainError]:
        if not title:
            yield ERR_FORM_TITLE_REQUIRED
            return

        length = len(title)
        if length < MIN_TITLE_LENGTH or length > MAX_TITLE_LENGTH:
            yield (
                new(
                    ErrorCode.VALIDATION,
                    f"title must be between {MIN_TITLE_LENGTH} and {MAX_TITLE_LENGTH} characters",
                )
                .with_context("field", "title")
                .with_context("min", MIN_TITLE_LENGTH)
                .with_context("max", MAX_TITLE_LENGTH)
                .with_context("length", length)
            )

    def _description_problems(self, description: Optional[str]) -> Iterator[DomainError]:
        if description and len(description) > MAX_DESCRIPTION_LENGTH:
            yield (
                new(
                    ErrorCode.VALIDATION,
                    f"description must not exceed {MAX_DESCRIPTION_LENGTH} characters",
                )
                .with_context("field", "description")
                .with_context("max", MAX_DESCRIPTION_LENGTH)
                .with_context("length", len(description))
            )

    def _schema_problems(self, schema) -> Iterator[DomainError]:
        if schema is None:
            yield ERR_FORM_SCHEMA_REQUIRED
            return

        if not isinstance(schema, dict) or len(schema) == 0:
            yield wrap(
                ERR_FORM_SCHEMA_REQUIRED,
                ErrorCode.VALIDATION,
                "form schema must be a non-empty object",
            ).with_context("field", "schema")
            return

        dialect = resolve_dialect(schema, self.dialect)
        shape_validator = get_schema_validator(dialect)
        for problem in shape_validator.iter_problems(schema):
            yield (
                wrap(problem, ErrorCode.VALIDATION, f"invalid form schema: {problem.message}")
                .with_context("dialect", dialect.value)
            )

    def _log(self, form: FormDefinition, errors: list[DomainError], start_time: float) -> None:
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        if not errors:
            logger.debug("form_validation_complete", form_id=form.id, valid=True, duration_ms=duration_ms)
            return
        logger.info(
            "form_validation_failed",
            form_id=form.id,
            codes=[e.code_value for e in errors],
            fields=[e.context.get("field") for e in errors],
            total_errors=len(errors),
            duration_ms=duration_ms,
        )
