"""Tests for the shared FormApp update loop, using a minimal form."""

from typing import Any

import pytest
from structlog.testing import capture_logs

from formfield.apps.base import FormApp, FormModel
from formfield.apps.messages import Blur, Focus, Input, SetDisabled, Submit, edit
from formfield.domain.field import Field, Metadata, init, is_invalid, is_valid, to_result
from formfield.domain.result import Err
from formfield.domain.validators import Validator, chain
from formfield.fields import integer, string
from tests.conftest import row_for


class _PetForm(FormApp):
    op = "pet"
    labels = {"name": "Pet name"}

    def initial_fields(self) -> dict[str, Field[Any, str]]:
        return {"name": init(""), "legs": init(4)}

    def validators(self) -> dict[str, Validator[Any, str]]:
        return {
            "name": chain(
                string.not_empty("Name is required"),
                string.at_least(2, "Name is too short"),
            ),
            "legs": integer.less_than_or_equal(8, "Too many legs"),
        }


@pytest.fixture
def app() -> _PetForm:
    return _PetForm()


class TestInit:
    def test_initial_model(self, app: _PetForm) -> None:
        model = app.init()
        assert list(model.fields) == ["name", "legs"]
        assert not model.submitted
        assert all(is_valid(f) for f in model.fields.values())

    def test_pristine_fields_not_validated(self, app: _PetForm) -> None:
        """An empty required field is not flagged before anyone touches it."""
        assert is_valid(app.init().fields["name"])


class TestFocusBlur:
    def test_focus_sets_active(self, app: _PetForm) -> None:
        model = app.update(app.init(), Focus("name"))
        assert model.fields["name"].metadata == Metadata(active=True)

    def test_blur_marks_touched(self, app: _PetForm) -> None:
        model = app.run([Focus("name"), Blur("name")])
        assert model.fields["name"].metadata == Metadata(touched=True, active=False)

    def test_focus_does_not_validate(self, app: _PetForm) -> None:
        model = app.run([Focus("name"), Blur("name")])
        assert is_valid(model.fields["name"])


class TestInput:
    def test_input_validates(self, app: _PetForm) -> None:
        model = app.update(app.init(), Input("name", "a"))
        assert to_result(model.fields["name"]) == Err("Name is too short")
        assert model.fields["name"].metadata.touched

    def test_correction_clears_error(self, app: _PetForm) -> None:
        model = app.run([Input("name", "a"), Input("name", "Rex")])
        assert is_valid(model.fields["name"])
        assert model.fields["name"].value == "Rex"

    def test_each_field_independent(self, app: _PetForm) -> None:
        model = app.run([Input("legs", 100), Input("name", "Rex")])
        assert is_invalid(model.fields["legs"])
        assert is_valid(model.fields["name"])

    def test_does_not_mutate_previous_model(self, app: _PetForm) -> None:
        before = app.init()
        app.update(before, Input("name", "Rex"))
        assert before.fields["name"].value == ""

    def test_edit_helper(self, app: _PetForm) -> None:
        model = app.run(edit("name", "Rex"))
        field = model.fields["name"]
        assert field.value == "Rex"
        assert field.metadata == Metadata(touched=True, active=False)


class TestDisabled:
    def test_disabled_field_skips_validation(self, app: _PetForm) -> None:
        model = app.run([SetDisabled("legs", True), Input("legs", 100)])
        assert is_valid(model.fields["legs"])
        assert model.fields["legs"].metadata.disabled

    def test_disabled_field_not_submitted(self, app: _PetForm) -> None:
        model = app.run([SetDisabled("legs", True), Input("name", "Rex")])
        result = app.submit(model)
        assert result.ok
        assert result.data["values"] == {"name": "Rex"}
        assert result.warnings == ["legs is disabled and was not submitted"]

    def test_disabled_invalid_field_does_not_block(self, app: _PetForm) -> None:
        model = app.run([Input("legs", 100), SetDisabled("legs", True), Input("name", "Rex")])
        assert app.submit(model).ok

    def test_re_enabled_field_validated_on_submit(self, app: _PetForm) -> None:
        model = app.run(
            [SetDisabled("legs", True), Input("legs", 100), SetDisabled("legs", False)]
        )
        result = app.submit(app.update(model, Input("name", "Rex")))
        assert not result.ok
        assert result.error.detail["errors"] == {"legs": "Too many legs"}


class TestSubmit:
    def test_submit_validates_untouched_fields(self, app: _PetForm) -> None:
        model = app.update(app.init(), Submit())
        assert model.submitted
        assert to_result(model.fields["name"]) == Err("Name is required")
        assert all(f.metadata.touched for f in model.fields.values())

    def test_rejected_result(self, app: _PetForm) -> None:
        result = app.submit(app.init())
        assert not result.ok
        assert result.op == "pet"
        assert result.error.code == "INVALID_FORM"
        assert result.error.message == "1 field(s) failed validation"
        assert result.error.detail == {"errors": {"name": "Name is required"}}
        assert "values" not in result.data

    def test_accepted_result(self, app: _PetForm) -> None:
        result = app.submit(app.run(edit("name", "Rex")))
        assert result.ok
        assert result.error is None
        assert result.data["values"] == {"name": "Rex", "legs": 4}

    def test_submit_logs_outcome(self, app: _PetForm) -> None:
        with capture_logs() as logs:
            app.submit(app.init())
        rejected = [e for e in logs if e["event"] == "form.rejected"]
        assert rejected == [
            {"event": "form.rejected", "form": "pet", "invalid": ["name"], "log_level": "info"}
        ]


class TestRows:
    def test_row_shape(self, app: _PetForm) -> None:
        model = app.update(app.init(), Input("name", "a"))
        row = row_for(app.rows(model), "name")
        assert row == {
            "name": "name",
            "label": "Pet name",
            "value": "a",
            "valid": False,
            "error": "Name is too short",
            "touched": True,
            "active": False,
            "disabled": False,
        }

    def test_label_falls_back_to_name(self, app: _PetForm) -> None:
        row = row_for(app.rows(app.init()), "legs")
        assert row["label"] == "legs"
        assert row["valid"] is True
        assert row["error"] is None

    def test_rows_follow_field_order(self, app: _PetForm) -> None:
        assert [r["name"] for r in app.rows(app.init())] == ["name", "legs"]


class TestUnknownMessages:
    def test_unknown_field_ignored_and_logged(self, app: _PetForm) -> None:
        model = app.init()
        with capture_logs() as logs:
            assert app.update(model, Input("tail", "long")) is model
        assert logs == [
            {"event": "form.unknown_field", "form": "pet", "field": "tail", "log_level": "warning"}
        ]

    def test_unsupported_message_type(self, app: _PetForm) -> None:
        with pytest.raises(TypeError, match="Unsupported message"):
            app.update(app.init(), object())  # type: ignore[arg-type]


class TestFormModel:
    def test_with_field_returns_copy(self) -> None:
        model = FormModel(fields={"a": init(1)})
        updated = model.with_field("a", init(2))
        assert model.fields["a"].value == 1
        assert updated.fields["a"].value == 2

    def test_get_missing(self) -> None:
        assert FormModel(fields={}).get("x") is None
