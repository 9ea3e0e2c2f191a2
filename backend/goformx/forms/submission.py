"""Form submissions — data posted against a published form."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from goformx.errors import DomainError, ErrorCode, new

# Schema rule marking a field as mandatory in submitted data
VALIDATE_REQUIRED = "required"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubmissionStatus(str, Enum):
    """Processing state of a submission."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class FormSubmission(BaseModel):
    """One set of answers to a form."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    form_id: str = ""
    data: Optional[dict[str, Any]] = None
    submitted_at: datetime = Field(default_factory=_utcnow)
    status: SubmissionStatus = SubmissionStatus.PENDING
    metadata: Optional[dict[str, Any]] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        form_id: str,
        data: Optional[dict[str, Any]],
        metadata: Optional[dict[str, Any]] = None,
    ) -> "FormSubmission":
        now = _utcnow()
        return cls(
            form_id=form_id,
            data=data,
            metadata=metadata,
            submitted_at=now,
            created_at=now,
            updated_at=now,
        )

    def check(self) -> Optional[DomainError]:
        """Structural checks on the submission itself."""
        if not self.form_id:
            return new(ErrorCode.VALIDATION, "form ID is required").with_context("field", "form_id")
        if self.data is None:
            return new(ErrorCode.VALIDATION, "submission data is required").with_context("field", "data")
        return None

    def set_status(self, status: SubmissionStatus) -> None:
        self.status = status
        self.updated_at = _utcnow()

    def is_pending(self) -> bool:
        return self.status == SubmissionStatus.PENDING

    def is_processing(self) -> bool:
        return self.status == SubmissionStatus.PROCESSING

    def is_completed(self) -> bool:
        return self.status == SubmissionStatus.COMPLETED

    def is_failed(self) -> bool:
        return self.status == SubmissionStatus.FAILED

    def add_metadata(self, key: str, value: str) -> None:
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value

    def get_metadata(self, key: str) -> str:
        """Metadata value for key, "" when absent or not a string."""
        if self.metadata is None:
            return ""
        value = self.metadata.get(key)
        return value if isinstance(value, str) else ""


def check_required_fields(data: dict[str, Any], schema: dict[str, Any]) -> Optional[DomainError]:
    """Check submitted data against per-field ``validate`` rules in a schema.

    Only mapping entries carrying ``validate: "required"`` are enforced;
    a missing key or an empty string fails.
    """
    for field_name, field_schema in schema.items():
        if not isinstance(field_schema, dict):
            continue
        if field_schema.get("validate") != VALIDATE_REQUIRED:
            continue
        if field_name not in data or data[field_name] == "":
            return (
                new(ErrorCode.REQUIRED, f"field {field_name} is required")
                .with_context("field", field_name)
            )
    return None
