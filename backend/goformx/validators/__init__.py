"""Form Validator — deterministic validation of form definitions before persistence.

Usage:
    from goformx.validators import FormDefinitionValidator

    error = FormDefinitionValidator().validate(form)
    if error is not None:
        # Render error.code / error.context back to the user
"""

from goformx.validators.base import BaseSchemaValidator
from goformx.validators.dialects import SchemaDialect, get_schema_validator, resolve_dialect
from goformx.validators.fields_schema import FieldsSchemaValidator
from goformx.validators.form_validator import FormDefinitionValidator
from goformx.validators.json_schema import JsonSchemaValidator

__all__ = [
    "BaseSchemaValidator",
    "FieldsSchemaValidator",
    "JsonSchemaValidator",
    "FormDefinitionValidator",
    "SchemaDialect",
    "get_schema_validator",
    "resolve_dialect",
]
