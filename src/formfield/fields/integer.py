"""Validators for integer fields.

Digit-count bounds count the digits of the absolute value, so ``-123``
has three digits and ``0`` has one.
"""

from __future__ import annotations

from typing import TypeAlias, TypeVar

from formfield.domain.field import Field
from formfield.domain.validators import Validator, create_validator

E = TypeVar("E")

IntField: TypeAlias = Field[int, E]


def _digit_count(value: int) -> int:
    return len(str(abs(value)))


def at_least(digits: int, error: E) -> Validator[int, E]:
    """Value must have at least *digits* digits."""
    return create_validator(lambda value: _digit_count(value) >= digits, error)


def at_most(digits: int, error: E) -> Validator[int, E]:
    """Value must have at most *digits* digits."""
    return create_validator(lambda value: _digit_count(value) <= digits, error)


def exactly(digits: int, error: E) -> Validator[int, E]:
    """Value must have exactly *digits* digits."""
    return create_validator(lambda value: _digit_count(value) == digits, error)


def greater_than(bound: int, error: E) -> Validator[int, E]:
    return create_validator(lambda value: value > bound, error)


def greater_than_or_equal(bound: int, error: E) -> Validator[int, E]:
    return create_validator(lambda value: value >= bound, error)


def less_than(bound: int, error: E) -> Validator[int, E]:
    return create_validator(lambda value: value < bound, error)


def less_than_or_equal(bound: int, error: E) -> Validator[int, E]:
    return create_validator(lambda value: value <= bound, error)
