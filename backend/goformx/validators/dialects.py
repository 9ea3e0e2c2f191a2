"""Schema dialects — which shape validator applies to a form schema."""

from enum import Enum
from typing import Union

from goformx.errors import ErrorCode, new
from goformx.validators.base import BaseSchemaValidator
from goformx.validators.fields_schema import FieldsSchemaValidator
from goformx.validators.json_schema import JsonSchemaValidator


class SchemaDialect(str, Enum):
    """Form schema shapes found in stored forms."""

    FIELDS = "fields"            # {"fields": [...], "title", "description"}
    JSON_SCHEMA = "json_schema"  # {"type": "object", "properties" | "components"}
    AUTO = "auto"                # pick per schema


_STRATEGIES: dict[SchemaDialect, BaseSchemaValidator] = {
    SchemaDialect.FIELDS: FieldsSchemaValidator(),
    SchemaDialect.JSON_SCHEMA: JsonSchemaValidator(),
}


def parse_dialect(value: Union[SchemaDialect, str]) -> SchemaDialect:
    """Parse a configured dialect name, raising a CONFIG error if unknown."""
    try:
        return SchemaDialect(value)
    except ValueError:
        raise new(
            ErrorCode.CONFIG,
            f"unknown schema dialect '{value}'",
        ).with_context("allowed", [d.value for d in SchemaDialect]) from None


def resolve_dialect(schema: dict, dialect: SchemaDialect = SchemaDialect.AUTO) -> SchemaDialect:
    """Concrete dialect for a schema; AUTO picks FIELDS when a 'fields' key is present."""
    if dialect != SchemaDialect.AUTO:
        return dialect
    if "fields" in schema:
        return SchemaDialect.FIELDS
    return SchemaDialect.JSON_SCHEMA


def get_schema_validator(dialect: SchemaDialect) -> BaseSchemaValidator:
    """Shape validator for a concrete dialect."""
    if dialect == SchemaDialect.AUTO:
        raise ValueError("AUTO must be resolved against a schema first")
    return _STRATEGIES[dialect]
