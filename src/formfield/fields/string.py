"""Validators for text fields."""

from __future__ import annotations

from typing import TypeAlias, TypeVar

from formfield.domain.field import Field
from formfield.domain.recognizers import is_email, is_non_numeric, is_numeric
from formfield.domain.validators import Validator, create_validator

E = TypeVar("E")

StringField: TypeAlias = Field[str, E]


def not_empty(error: E) -> Validator[str, E]:
    return create_validator(lambda value: value != "", error)


def email(error: E) -> Validator[str, E]:
    """Value must be shaped like an email address (see :func:`is_email`)."""
    return create_validator(is_email, error)


def numeric(error: E) -> Validator[str, E]:
    """Value must consist only of decimal digits. Empty fails."""
    return create_validator(is_numeric, error)


def non_numeric(error: E) -> Validator[str, E]:
    """Value must contain no decimal digit. Empty fails."""
    return create_validator(is_non_numeric, error)


def at_least(length: int, error: E) -> Validator[str, E]:
    return create_validator(lambda value: len(value) >= length, error)


def at_most(length: int, error: E) -> Validator[str, E]:
    return create_validator(lambda value: len(value) <= length, error)


def exactly(length: int, error: E) -> Validator[str, E]:
    return create_validator(lambda value: len(value) == length, error)


def optional(validator: Validator[str, E]) -> Validator[str, E]:
    """Skip *validator* entirely when the value is the empty string.

    The empty field is returned unchanged, so it stays valid even when
    *validator* would reject ``""``.
    """

    def apply(field: StringField[E]) -> StringField[E]:
        if field.value == "":
            return field
        return validator(field)

    return apply
