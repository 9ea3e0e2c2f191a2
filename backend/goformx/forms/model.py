"""Form definition — the record a user builds, publishes and collects submissions for."""

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field

MIN_TITLE_LENGTH = 3
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FormDefinition(BaseModel):
    """A form's metadata and field schema.

    Mutators never validate; call validate_definition() (or a FormDefinitionValidator)
    before handing the form to storage.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), frozen=True)
    owner_id: str = Field(default="", frozen=True)
    title: str = ""
    description: str = ""
    form_schema: Optional[dict[str, Any]] = Field(default=None, alias="schema")
    active: bool = True
    created_at: datetime = Field(default_factory=_utcnow, frozen=True)
    updated_at: datetime = Field(default_factory=_utcnow)

    model_config = {"populate_by_name": True}

    @classmethod
    def create(
        cls,
        owner_id: str,
        title: str,
        description: str = "",
        schema: Optional[dict[str, Any]] = None,
    ) -> "FormDefinition":
        """New active form with a fresh id and matching timestamps."""
        now = _utcnow()
        return cls(
            owner_id=owner_id,
            title=title,
            description=description,
            form_schema=schema,
            active=True,
            created_at=now,
            updated_at=now,
        )

    def update(self, title: str, description: str, schema: Optional[dict[str, Any]] = None) -> None:
        """Replace title and description; the schema only when one is given."""
        self.title = title
        self.description = description
        if schema is not None:
            self.form_schema = schema
        self._touch()

    def activate(self) -> None:
        self.active = True
        self._touch()

    def deactivate(self) -> None:
        self.active = False
        self._touch()

    def validate_definition(self):
        """Run the default validator; returns a DomainError or None."""
        from goformx.validators.form_validator import FormDefinitionValidator

        return FormDefinitionValidator().validate(self)

    def _touch(self) -> None:
        self.updated_at = _utcnow()

    # ── Storage layout ──

    def to_record(self) -> dict[str, Any]:
        """Row for the ``forms`` table; the schema is serialized JSON."""
        return {
            "uuid": self.id,
            "user_id": self.owner_id,
            "title": self.title,
            "description": self.description,
            "schema": json.dumps(self.form_schema) if self.form_schema is not None else None,
            "active": self.active,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_record(cls, row: dict[str, Any]) -> "FormDefinition":
        """Rebuild a form from a ``forms`` row."""
        schema = row.get("schema")
        if isinstance(schema, (str, bytes)):
            schema = json.loads(schema)
        return cls(
            id=row.get("uuid") or row["id"],
            owner_id=row.get("user_id", ""),
            title=row.get("title", ""),
            description=row.get("description") or "",
            form_schema=schema,
            active=row.get("active", True),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
