"""Tests for form submissions."""

import pytest

from goformx.errors import ErrorCode
from goformx.forms import FormSubmission, SubmissionStatus, check_required_fields


class TestFormSubmission:
    def test_create_defaults_to_pending(self):
        submission = FormSubmission.create("form-1", {"email": "a@b.c"})

        assert submission.is_pending()
        assert submission.status == SubmissionStatus.PENDING
        assert submission.check() is None

    def test_form_id_required(self):
        error = FormSubmission.create("", {"email": "a@b.c"}).check()

        assert error.code == ErrorCode.VALIDATION
        assert error.message == "form ID is required"
        assert error.context["field"] == "form_id"

    def test_data_required(self):
        error = FormSubmission.create("form-1", None).check()

        assert error.message == "submission data is required"
        assert error.context["field"] == "data"

    def test_empty_data_is_allowed(self):
        assert FormSubmission.create("form-1", {}).check() is None

    @pytest.mark.parametrize(
        "status,predicate",
        [
            (SubmissionStatus.PROCESSING, "is_processing"),
            (SubmissionStatus.COMPLETED, "is_completed"),
            (SubmissionStatus.FAILED, "is_failed"),
        ],
    )
    def test_set_status(self, status, predicate):
        submission = FormSubmission.create("form-1", {})
        before = submission.updated_at

        submission.set_status(status)

        assert getattr(submission, predicate)()
        assert not submission.is_pending()
        assert submission.updated_at >= before

    def test_metadata(self):
        submission = FormSubmission.create("form-1", {})

        assert submission.get_metadata("ip") == ""
        submission.add_metadata("ip", "127.0.0.1")
        assert submission.get_metadata("ip") == "127.0.0.1"

        submission.metadata["count"] = 3
        assert submission.get_metadata("count") == ""


class TestRequiredFields:
    schema = {
        "email": {"type": "email", "validate": "required"},
        "note": {"type": "textarea"},
        "legacy": "text",
    }

    def test_missing_required_field(self):
        error = check_required_fields({"note": "hi"}, self.schema)

        assert error.code == ErrorCode.REQUIRED
        assert error.message == "field email is required"
        assert error.context["field"] == "email"

    def test_empty_string_fails(self):
        assert check_required_fields({"email": ""}, self.schema) is not None

    def test_present_value_passes(self):
        assert check_required_fields({"email": "a@b.c"}, self.schema) is None
