"""Form definitions and submissions."""

from goformx.forms.model import (
    FormDefinition,
    MIN_TITLE_LENGTH,
    MAX_TITLE_LENGTH,
    MAX_DESCRIPTION_LENGTH,
)
from goformx.forms.submission import FormSubmission, SubmissionStatus, check_required_fields

__all__ = [
    "FormDefinition",
    "MIN_TITLE_LENGTH",
    "MAX_TITLE_LENGTH",
    "MAX_DESCRIPTION_LENGTH",
    "FormSubmission",
    "SubmissionStatus",
    "check_required_fields",
]
