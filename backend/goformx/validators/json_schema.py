"""JSON Schema Validator — form schemas written as a JSON-Schema-like object."""

from typing import Any, Iterator

from goformx.errors import DomainError, ErrorCode
from goformx.validators.base import BaseSchemaValidator

VALID_PROPERTY_TYPES = {"string", "number", "integer", "boolean", "array", "object"}


class JsonSchemaValidator(BaseSchemaValidator):
    """Validates ``{"type": "object", "properties" | "components": ...}`` schemas.

    Components are only checked for presence; their contents belong to the
    form builder.
    """

    @property
    def name(self) -> str:
        return "JsonSchemaValidator"

    @property
    def dialect(self) -> str:
        return "json_schema"

    def iter_problems(self, schema: dict) -> Iterator[DomainError]:
        if "type" not in schema:
            yield self._missing("type")
            return

        if schema["type"] != "object":
            yield self._error(
                ErrorCode.INVALID,
                "invalid schema type: must be 'object'",
                field="type",
                type=schema["type"],
            )
            return

        has_properties = "properties" in schema
        has_components = "components" in schema

        if has_properties:
            properties = schema["properties"]
            if not isinstance(properties, dict):
                yield self._error(
                    ErrorCode.INVALID_FORMAT,
                    f"'properties' must be an object, got {self._type_name(properties)}",
                    field="properties",
                )
            else:
                for prop_name, prop in properties.items():
                    yield from self._property_problems(prop_name, prop)

        if has_components and not isinstance(schema["components"], list):
            yield self._error(
                ErrorCode.INVALID_FORMAT,
                f"'components' must be an array, got {self._type_name(schema['components'])}",
                field="components",
            )

        if not has_properties and not has_components:
            yield self._error(
                ErrorCode.REQUIRED,
                "schema must contain either properties or components",
                field="properties",
            )

    def _property_problems(self, prop_name: str, prop: Any) -> Iterator[DomainError]:
        path = f"properties.{prop_name}"

        if not isinstance(prop, dict):
            yield self._error(
                ErrorCode.INVALID_FORMAT,
                f"invalid property format for '{prop_name}': must be an object",
                field=path,
                property=prop_name,
            )
            return

        if "type" not in prop:
            yield self._error(
                ErrorCode.REQUIRED,
                f"missing type for property '{prop_name}'",
                field=f"{path}.type",
                property=prop_name,
            )
            return

        prop_type = prop["type"]
        if not isinstance(prop_type, str):
            yield self._error(
                ErrorCode.INVALID_FORMAT,
                f"invalid type format for property '{prop_name}'",
                field=f"{path}.type",
                property=prop_name,
            )
        elif prop_type not in VALID_PROPERTY_TYPES:
            yield self._error(
                ErrorCode.INVALID,
                f"invalid type '{prop_type}' for property '{prop_name}'",
                field=f"{path}.type",
                property=prop_name,
                type=prop_type,
            )
