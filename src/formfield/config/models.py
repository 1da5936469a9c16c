"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, formfield.toml only contains
overrides for the example forms.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- formfield.toml sections ---


class SignupConfig(BaseModel):
    """[signup] section."""

    model_config = {"frozen": True}

    password_min_length: int = 8
    minimum_age: int = 13


class SurveyConfig(BaseModel):
    """[survey] section."""

    model_config = {"frozen": True}

    name_max_length: int = 40
    zip_code_length: int = 5
    phone_length: int = 10
    max_household: int = 99
    rating_min: float = 0.0
    rating_max: float = 5.0
