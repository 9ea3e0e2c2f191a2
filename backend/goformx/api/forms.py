"""Forms API — validate form definitions and submissions before they are saved."""

import structlog
from fastapi import APIRouter

from goformx.config import get_settings
from goformx.errors.translate import error_code_table
from goformx.forms import FormDefinition, FormSubmission, check_required_fields
from goformx.models.requests import ValidateFormRequest, ValidateSubmissionRequest
from goformx.models.responses import (
    ErrorCodeInfo,
    FormValidationResponse,
    SubmissionValidationResponse,
)
from goformx.validators import FormDefinitionValidator, resolve_dialect

logger = structlog.get_logger()

router = APIRouter()


@router.post("/forms/validate", response_model=FormValidationResponse)
async def validate_form(request_body: ValidateFormRequest):
    """Check a candidate form definition.

    Invalid forms are rendered by the DomainError handler with the status of
    the error's category.
    """
    settings = get_settings()
    validator = FormDefinitionValidator(request_body.dialect)
    collect_all = (
        request_body.collect_all
        if request_body.collect_all is not None
        else settings.COLLECT_ALL_ERRORS
    )

    form = FormDefinition(
        title=request_body.title,
        description=request_body.description,
        form_schema=request_body.form_schema,
    )
    validator.ensure_valid(form, collect_all=collect_all)

    dialect = resolve_dialect(form.form_schema, validator.dialect)
    return FormValidationResponse(dialect=dialect.value)


@router.post("/forms/submissions/validate", response_model=SubmissionValidationResponse)
async def validate_submission(request_body: ValidateSubmissionRequest):
    """Check a submission payload, and its required fields when a schema is given."""
    submission = FormSubmission.create(
        form_id=request_body.form_id,
        data=request_body.data,
        metadata=request_body.metadata,
    )

    error = submission.check()
    if error is None and request_body.form_schema:
        error = check_required_fields(submission.data, request_body.form_schema)
    if error is not None:
        raise error.with_context("form_id", submission.form_id)

    logger.debug("submission_valid", form_id=submission.form_id, submission_id=submission.id)

    return SubmissionValidationResponse(
        form_id=submission.form_id,
        status=submission.status.value,
    )


@router.get("/errors/codes", response_model=list[ErrorCodeInfo])
async def list_error_codes():
    """Error codes with their status category and HTTP status."""
    return error_code_table()
