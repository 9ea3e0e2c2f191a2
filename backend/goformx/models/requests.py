"""API request models."""

from pydantic import BaseModel, Field
from typing import Any, Optional, Literal


class ValidateFormRequest(BaseModel):
    """A candidate form definition to check before saving."""

    title: str = ""
    description: str = ""
    form_schema: Optional[dict[str, Any]] = Field(
        default=None,
        alias="schema",
        description="Form schema, either a 'fields' array or a JSON-Schema-like object",
        examples=[{
            "title": "Contact",
            "description": "Contact form",
            "fields": [{"type": "email", "name": "email", "label": "Email"}],
        }],
    )
    dialect: Optional[Literal["fields", "json_schema", "auto"]] = None
    collect_all: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ValidateSubmissionRequest(BaseModel):
    """A submission payload, optionally checked against the form schema."""

    form_id: str = ""
    data: Optional[dict[str, Any]] = None
    metadata: Optional[dict[str, str]] = None
    form_schema: Optional[dict[str, Any]] = Field(default=None, alias="schema")

    model_config = {"populate_by_name": True}
