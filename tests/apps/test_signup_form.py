"""Tests for the signup example form."""

import pytest

from formfield.apps.messages import Input, SetDisabled, edit
from formfield.apps.signup import SignupForm
from formfield.config.models import SignupConfig
from formfield.domain.field import is_valid, to_result
from formfield.domain.result import Err


def _messages(email="ab@cd.ef", password="hunter2hunter2", age=30, terms=True):
    return [
        *edit("email", email),
        *edit("password", password),
        *edit("age", age),
        *edit("terms", terms),
    ]


class TestSignupSubmit:
    def test_valid_signup(self) -> None:
        form = SignupForm()
        result = form.submit(form.run(_messages()))
        assert result.ok
        assert result.op == "signup"
        assert result.data["values"] == {
            "email": "ab@cd.ef",
            "password": "hunter2hunter2",
            "age": 30,
            "terms": True,
        }

    def test_empty_submit_reports_every_field(self) -> None:
        form = SignupForm()
        result = form.submit(form.init())
        assert not result.ok
        assert result.error.detail["errors"] == {
            "email": "Email is required",
            "password": "Password is required",
            "age": "You must be at least 13 years old",
            "terms": "You must accept the terms",
        }
        assert result.error.message == "4 field(s) failed validation"

    def test_failed_submit_still_carries_rows(self) -> None:
        form = SignupForm()
        result = form.submit(form.init())
        assert [r["name"] for r in result.data["fields"]] == ["email", "password", "age", "terms"]


class TestSignupFields:
    @pytest.mark.parametrize(
        "value,error",
        [
            ("", "Email is required"),
            ("ab", "Enter a valid email address"),
            ("ab@cd", "Enter a valid email address"),
        ],
    )
    def test_email_errors(self, value: str, error: str) -> None:
        form = SignupForm()
        model = form.update(form.init(), Input("email", value))
        assert to_result(model.fields["email"]) == Err(error)

    def test_short_password(self) -> None:
        form = SignupForm()
        model = form.update(form.init(), Input("password", "short"))
        assert to_result(model.fields["password"]) == Err(
            "Password must be at least 8 characters"
        )

    @pytest.mark.parametrize(
        "age,error",
        [(12, "You must be at least 13 years old"), (150, "Enter a real age"), (13, None)],
    )
    def test_age_bounds(self, age: int, error: str | None) -> None:
        form = SignupForm()
        field = form.update(form.init(), Input("age", age)).fields["age"]
        if error is None:
            assert is_valid(field)
        else:
            assert to_result(field) == Err(error)


class TestSignupConfig:
    def test_configured_limits(self) -> None:
        form = SignupForm(SignupConfig(password_min_length=12, minimum_age=18))
        result = form.submit(form.run(_messages(password="hunter2", age=17)))
        assert result.error.detail["errors"] == {
            "password": "Password must be at least 12 characters",
            "age": "You must be at least 18 years old",
        }

    def test_disable_terms(self) -> None:
        form = SignupForm()
        messages = [SetDisabled("terms", True), *_messages(terms=False)]
        result = form.submit(form.run(messages))
        assert result.ok
        assert "terms" not in result.data["values"]
        assert result.warnings == ["terms is disabled and was not submitted"]
