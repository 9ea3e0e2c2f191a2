"""Tests for the FormDefinition entity lifecycle."""

import json

import pytest
from pydantic import ValidationError

from goformx.forms import FormDefinition


class TestCreate:
    def test_create_assigns_identity_and_defaults(self, fields_schema):
        form = FormDefinition.create("user-1", "Contact Us", "desc", fields_schema)

        assert form.id
        assert form.owner_id == "user-1"
        assert form.active is True
        assert form.created_at == form.updated_at
        assert form.form_schema == fields_schema

    def test_ids_are_unique(self, make_form):
        assert make_form().id != make_form().id

    def test_schema_alias(self, fields_schema):
        form = FormDefinition(title="Contact Us", schema=fields_schema)
        assert form.form_schema == fields_schema

    def test_identity_is_immutable(self, make_form):
        form = make_form()
        with pytest.raises(ValidationError):
            form.id = "other"
        with pytest.raises(ValidationError):
            form.owner_id = "someone-else"


class TestMutation:
    def test_update_replaces_values(self, make_form, json_schema):
        form = make_form()
        before = form.updated_at

        form.update("New title", "New description", json_schema)

        assert form.title == "New title"
        assert form.description == "New description"
        assert form.form_schema == json_schema
        assert form.updated_at >= before
        assert form.created_at <= form.updated_at

    def test_update_without_schema_keeps_schema(self, make_form, fields_schema):
        form = make_form()
        form.update("New title", "", None)
        assert form.form_schema == fields_schema

    def test_update_does_not_validate(self, make_form):
        form = make_form()
        form.update("", "x" * 1000)
        assert form.title == ""

    def test_activate_and_deactivate(self, make_form):
        form = make_form()

        form.deactivate()
        assert form.active is False
        form.deactivate()
        assert form.active is False

        form.activate()
        assert form.active is True


class TestValidateDefinition:
    def test_valid_form(self, make_form):
        assert make_form().validate_definition() is None

    def test_invalid_form(self, make_form):
        error = make_form(title="Hi").validate_definition()
        assert error is not None
        assert error.context["field"] == "title"


class TestRecord:
    def test_record_layout(self, make_form, fields_schema):
        form = make_form()
        row = form.to_record()

        assert row["uuid"] == form.id
        assert row["user_id"] == "user-1"
        assert json.loads(row["schema"]) == fields_schema
        assert row["active"] is True

    def test_from_record(self, make_form):
        form = make_form()
        restored = FormDefinition.from_record(form.to_record())

        assert restored.id == form.id
        assert restored.owner_id == form.owner_id
        assert restored.form_schema == form.form_schema
        assert restored.created_at == form.created_at
