"""SignupForm — account creation with email, password, age, and terms."""

from __future__ import annotations

from typing import Any

from formfield.apps.base import FormApp
from formfield.config.models import SignupConfig
from formfield.domain.field import Field, init
from formfield.domain.validators import Validator, chain
from formfield.fields import boolean, integer, string

MAXIMUM_AGE = 150


class SignupForm(FormApp):
    """Signup form; password and age limits come from ``[signup]`` config."""

    op = "signup"
    labels = {
        "email": "Email",
        "password": "Password",
        "age": "Age",
        "terms": "Accept terms",
    }

    def __init__(self, config: SignupConfig | None = None) -> None:
        self._config = config or SignupConfig()
        super().__init__()

    def initial_fields(self) -> dict[str, Field[Any, str]]:
        return {
            "email": init(""),
            "password": init(""),
            "age": init(0),
            "terms": init(False),
        }

    def validators(self) -> dict[str, Validator[Any, str]]:
        min_length = self._config.password_min_length
        min_age = self._config.minimum_age
        return {
            "email": chain(
                string.not_empty("Email is required"),
                string.email("Enter a valid email address"),
            ),
            "password": chain(
                string.not_empty("Password is required"),
                string.at_least(min_length, f"Password must be at least {min_length} characters"),
            ),
            "age": chain(
                integer.greater_than_or_equal(min_age, f"You must be at least {min_age} years old"),
                integer.less_than(MAXIMUM_AGE, "Enter a real age"),
            ),
            "terms": boolean.is_true("You must accept the terms"),
        }
