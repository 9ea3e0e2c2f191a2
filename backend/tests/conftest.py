"""Shared fixtures."""

import copy

import pytest

from goformx.forms import FormDefinition
from goformx.validators import FormDefinitionValidator

FIELDS_SCHEMA = {
    "title": "Contact",
    "description": "Contact form",
    "fields": [
        {"type": "text", "name": "name", "label": "Name"},
        {"type": "email", "name": "email", "label": "Email"},
        {
            "type": "select",
            "name": "topic",
            "label": "Topic",
            "options": [
                {"label": "Sales", "value": "sales"},
                {"label": "Support", "value": "support"},
            ],
        },
    ],
}

JSON_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer"},
    },
}


@pytest.fixture
def fields_schema() -> dict:
    return copy.deepcopy(FIELDS_SCHEMA)


@pytest.fixture
def json_schema() -> dict:
    return copy.deepcopy(JSON_SCHEMA)


@pytest.fixture
def validator() -> FormDefinitionValidator:
    return FormDefinitionValidator("auto")


@pytest.fixture
def make_form(fields_schema):
    """Build a FormDefinition, valid unless overridden."""

    def _make(**overrides) -> FormDefinition:
        values = {
            "owner_id": "user-1",
            "title": "Contact Us",
            "description": "",
            "schema": fields_schema,
        }
        values.update(overrides)
        return FormDefinition.create(**values)

    return _make
