"""Validators for checkbox-style boolean fields."""

from __future__ import annotations

from typing import TypeAlias, TypeVar

from formfield.domain.field import Field
from formfield.domain.validators import Validator, create_validator

E = TypeVar("E")

BoolField: TypeAlias = Field[bool, E]


def is_true(error: E) -> Validator[bool, E]:
    return create_validator(lambda value: value is True, error)


def is_false(error: E) -> Validator[bool, E]:
    return create_validator(lambda value: value is False, error)
