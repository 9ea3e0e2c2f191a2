"""Fields Schema Validator — form schemas written as a flat ``fields`` array.

    {
        "title": "Contact",
        "description": "Get in touch",
        "fields": [
            {"type": "email", "name": "email", "label": "Email"},
            {"type": "select", "name": "topic", "label": "Topic",
             "options": [{"label": "Sales", "value": "sales"}]},
        ],
    }
"""

from typing import Iterator

from goformx.errors import DomainError, ErrorCode
from goformx.validators.base import BaseSchemaValidator

# Required top-level keys
REQUIRED_KEYS = ["fields", "title", "description"]

# Required keys on every field
REQUIRED_FIELD_KEYS = ["type", "name", "label"]

VALID_FIELD_TYPES = {
    "text", "textarea", "number", "email", "select", "checkbox",
    "radio", "date", "password", "time", "datetime", "file",
}

# Field types that need a non-empty options list
CHOICE_FIELD_TYPES = {"select", "radio", "checkbox"}

REQUIRED_OPTION_KEYS = ["label", "value"]


class FieldsSchemaValidator(BaseSchemaValidator):
    """Validates the structure of a ``fields``-array form schema."""

    @property
    def name(self) -> str:
        return "FieldsSchemaValidator"

    @property
    def dialect(self) -> str:
        return "fields"

    def iter_problems(self, schema: dict) -> Iterator[DomainError]:
        # 1. Required top-level keys
        for key in REQUIRED_KEYS:
            if key not in schema:
                yield self._missing(key)

        # 2. Fields must be a list
        fields = schema.get("fields")
        if fields is None:
            return
        if not isinstance(fields, list):
            yield self._error(
                ErrorCode.INVALID_FORMAT,
                f"'fields' must be an array, got {self._type_name(fields)}",
                field="fields",
            )
            return

        # 3. Each field
        for i, field in enumerate(fields):
            yield from self._field_problems(i, field)

    def _field_problems(self, index: int, field) -> Iterator[DomainError]:
        path = f"fields[{index}]"

        if not isinstance(field, dict):
            yield self._error(
                ErrorCode.INVALID_FORMAT,
                f"field #{index + 1} must be an object",
                field=path,
                index=index,
            )
            return

        for key in REQUIRED_FIELD_KEYS:
            if key not in field:
                yield self._error(
                    ErrorCode.REQUIRED,
                    f"field #{index + 1} is missing '{key}'",
                    field=f"{path}.{key}",
                    index=index,
                )

        if "type" not in field:
            return
        field_type = field["type"]
        if not isinstance(field_type, str) or field_type not in VALID_FIELD_TYPES:
            yield self._error(
                ErrorCode.INVALID,
                f"invalid field type '{field_type}' for field #{index + 1}",
                field=f"{path}.type",
                index=index,
                type=field_type,
            )
            return

        if field_type in CHOICE_FIELD_TYPES:
            yield from self._option_problems(path, index, field_type, field.get("options"))

    def _option_problems(self, path: str, index: int, field_type: str, options) -> Iterator[DomainError]:
        options_path = f"{path}.options"

        if options is None:
            yield self._error(
                ErrorCode.REQUIRED,
                f"{field_type} field #{index + 1} requires options",
                field=options_path,
                index=index,
            )
            return
        if not isinstance(options, list):
            yield self._error(
                ErrorCode.INVALID_FORMAT,
                f"options for field #{index + 1} must be an array",
                field=options_path,
                index=index,
            )
            return
        if len(options) == 0:
            yield self._error(
                ErrorCode.INVALID,
                f"{field_type} field #{index + 1} must have at least one option",
                field=options_path,
                index=index,
            )
            return

        for j, option in enumerate(options):
            option_path = f"{options_path}[{j}]"
            if not isinstance(option, dict):
                yield self._error(
                    ErrorCode.INVALID_FORMAT,
                    f"option #{j + 1} of field #{index + 1} must be an object",
                    field=option_path,
                    index=index,
                )
                continue
            for key in REQUIRED_OPTION_KEYS:
                if key not in option:
                    yield self._error(
                        ErrorCode.REQUIRED,
                        f"option #{j + 1} of field #{index + 1} is missing '{key}'",
                        field=f"{option_path}.{key}",
                        index=index,
                    )
