"""SurveyForm — household survey mixing required and optional inputs.

The phone number is optional: blank passes, anything else must be a
digit string of the configured length.
"""

from __future__ import annotations

from typing import Any

from formfield.apps.base import FormApp
from formfield.config.models import SurveyConfig
from formfield.domain.field import Field, init
from formfield.domain.validators import Validator, chain
from formfield.fields import floating, integer, string


class SurveyForm(FormApp):
    op = "survey"
    labels = {
        "name": "Name",
        "zip_code": "ZIP code",
        "phone": "Phone (optional)",
        "household": "Household size",
        "rating": "Rating",
    }

    def __init__(self, config: SurveyConfig | None = None) -> None:
        self._config = config or SurveyConfig()
        super().__init__()

    def initial_fields(self) -> dict[str, Field[Any, str]]:
        return {
            "name": init(""),
            "zip_code": init(""),
            "phone": init(""),
            "household": init(1),
            "rating": init(self._config.rating_min),
        }

    def validators(self) -> dict[str, Validator[Any, str]]:
        cfg = self._config
        return {
            "name": chain(
                string.not_empty("Name is required"),
                string.non_numeric("Name cannot contain digits"),
                string.at_most(
                    cfg.name_max_length,
                    f"Name must be at most {cfg.name_max_length} characters",
                ),
            ),
            "zip_code": chain(
                string.numeric("ZIP code must contain only digits"),
                string.exactly(
                    cfg.zip_code_length,
                    f"ZIP code must be {cfg.zip_code_length} digits",
                ),
            ),
            "phone": string.optional(
                chain(
                    string.numeric("Phone must contain only digits"),
                    string.exactly(cfg.phone_length, f"Phone must be {cfg.phone_length} digits"),
                )
            ),
            "household": chain(
                integer.greater_than(0, "Household must include at least one person"),
                integer.less_than_or_equal(
                    cfg.max_household,
                    f"Household size must be at most {cfg.max_household}",
                ),
            ),
            "rating": chain(
                floating.greater_than_or_equal(
                    cfg.rating_min, f"Rating must be at least {cfg.rating_min}"
                ),
                floating.less_than_or_equal(
                    cfg.rating_max, f"Rating must be at most {cfg.rating_max}"
                ),
            ),
        }
